"""Predicates over query options.

Options arrive as plain mappings from the caller. Malformed values are
never rejected: every predicate answers False and the value is treated
as unset.
"""

from typing import Any, Mapping

ENTRY_SORT_VALUES = ("dictID", "id", "str")


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def _filter_list(options: Mapping[str, Any], key: str) -> list[str] | None:
    filter_ = options.get("filter")
    if not isinstance(filter_, Mapping):
        return None
    values = filter_.get(key)
    if not isinstance(values, (list, tuple)) or len(values) == 0:
        return None
    return list(values)


def has_proper_page(options: Mapping[str, Any]) -> bool:
    return _is_positive_int(options.get("page"))


def has_proper_per_page(options: Mapping[str, Any]) -> bool:
    return _is_positive_int(options.get("perPage"))


def has_proper_entry_sort(options: Mapping[str, Any]) -> bool:
    sort = options.get("sort")
    return isinstance(sort, str) and sort in ENTRY_SORT_VALUES


def has_proper_filter_id(options: Mapping[str, Any]) -> bool:
    """True when filter.id is a non-empty list (blank items included)."""
    return _filter_list(options, "id") is not None


def requested_ids(options: Mapping[str, Any]) -> list[str]:
    """Non-blank identifiers from filter.id, in request order."""
    values = _filter_list(options, "id") or []
    return [v for v in values if isinstance(v, str) and v.strip()]


def dict_id_allowed(options: Mapping[str, Any], dict_id: str) -> bool:
    """False only when a non-empty filter.dictID list leaves dict_id out."""
    allowed = _filter_list(options, "dictID")
    return allowed is None or dict_id in allowed


def page_and_size(options: Mapping[str, Any], default_size: int) -> tuple[int, int]:
    """Valid (page, perPage) with defaults (1, default_size)."""
    page = options["page"] if has_proper_page(options) else 1
    size = options["perPage"] if has_proper_per_page(options) else default_size
    return page, size
