"""Sort, paginate and prune aggregated dictionary results."""

from typing import Any, Mapping, Sequence, TypeVar

from uniprot_dictionary.dictionary.models import EntryRecord
from uniprot_dictionary.dictionary.options import has_proper_entry_sort, page_and_size

RecordT = TypeVar("RecordT")


def sort_entries(
    entries: list[EntryRecord],
    options: Mapping[str, Any],
) -> list[EntryRecord]:
    """Sort entries case-insensitively.

    sort="str" orders by primary term with id as tie-break; any other
    value (including "id", "dictID" and invalid ones) orders by id.
    """
    if has_proper_entry_sort(options) and options["sort"] == "str":
        return sorted(
            entries,
            key=lambda e: (e.primary_term.lower(), e.id.lower()),
        )
    return sorted(entries, key=lambda e: e.id.lower())


def paginate(
    items: Sequence[RecordT],
    options: Mapping[str, Any],
    default_size: int,
) -> list[RecordT]:
    """Slice one page; pages past the end are empty."""
    page, size = page_and_size(options, default_size)
    start = (page - 1) * size
    return list(items[start:min(page * size, len(items))])


def z_prune(items: list[dict[str, Any]], z: Any = None) -> list[dict[str, Any]]:
    """Restrict the auxiliary "z" fields of record dicts.

    Args:
        items: Record dicts as returned to callers
        z: None or True keeps every key, False drops "z" entirely,
           a key name or list of key names keeps only those keys

    Returns:
        New list of dicts; a "z" left with no keys is removed
    """
    if z is None or z is True:
        return items
    if isinstance(z, str):
        z = [z]

    pruned = []
    for item in items:
        if "z" not in item:
            pruned.append(item)
            continue

        item = dict(item)
        if not isinstance(z, (list, tuple)):
            del item["z"]
        else:
            kept = {k: v for k, v in item["z"].items() if k in z}
            if kept:
                item["z"] = kept
            else:
                del item["z"]
        pruned.append(item)

    return pruned
