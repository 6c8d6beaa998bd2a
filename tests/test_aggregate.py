"""Tests for option predicates, sorting, pagination and z-pruning."""

import pytest

from uniprot_dictionary.dictionary.aggregate import paginate, sort_entries, z_prune
from uniprot_dictionary.dictionary.models import EntryRecord, Term
from uniprot_dictionary.dictionary.options import (
    dict_id_allowed,
    has_proper_entry_sort,
    has_proper_filter_id,
    has_proper_page,
    has_proper_per_page,
    requested_ids,
)


def entry(entry_id, term):
    return EntryRecord(id=entry_id, dict_id="uniprot", terms=[Term(string=term)])


@pytest.fixture
def unsorted_entries():
    return [
        entry("e", "a"),
        entry("d", "b"),
        entry("c", "c"),
        entry("b", "b"),
        entry("a", "c"),
    ]


def ids(entries):
    return [e.id for e in entries]


@pytest.mark.parametrize("sort", [None, {}, "", "dictID", "id", "noResultsStr"])
def test_sort_entries_by_id(unsorted_entries, sort):
    options = {} if sort is None else {"sort": sort}

    assert ids(sort_entries(unsorted_entries, options)) == ["a", "b", "c", "d", "e"]


def test_sort_entries_by_str_ties_on_id(unsorted_entries):
    """Equal primary terms are ordered by id."""
    result = sort_entries(unsorted_entries, {"sort": "str"})

    assert ids(result) == ["e", "b", "d", "a", "c"]


def test_sort_entries_case_insensitive():
    entries = [entry("B", "beta"), entry("a", "Beta"), entry("C", "alpha")]

    assert ids(sort_entries(entries, {})) == ["a", "B", "C"]
    assert ids(sort_entries(entries, {"sort": "str"})) == ["C", "a", "B"]


def test_sort_entries_does_not_mutate(unsorted_entries):
    before = ids(unsorted_entries)
    sort_entries(unsorted_entries, {"sort": "str"})

    assert ids(unsorted_entries) == before


def test_paginate():
    items = ["a", "b", "c"]

    assert paginate(items, {}, 50) == items
    assert paginate(items, {"page": -1, "perPage": "no"}, 50) == items
    assert paginate(items, {"page": 1, "perPage": 2}, 50) == ["a", "b"]
    assert paginate(items, {"page": 2, "perPage": 2}, 50) == ["c"]
    assert paginate(items, {"page": 3, "perPage": 2}, 50) == []


def test_paginate_default_size():
    items = list(range(7))

    assert paginate(items, {"page": 2}, 3) == [3, 4, 5]


def test_paginate_contiguous_slices():
    """Consecutive pages tile the input without gaps or overlap."""
    items = list(range(23))
    pages = [paginate(items, {"page": p, "perPage": 5}, 50) for p in range(1, 7)]

    assert all(len(page) <= 5 for page in pages)
    assert [x for page in pages for x in page] == items
    assert pages[-1] == []


@pytest.fixture
def records():
    return [
        {"id": "a", "z": {"genes": ["A"], "species": "Human", "score": "5 out of 5"}},
        {"id": "b", "z": {"species": "Mouse"}},
        {"id": "c"},
    ]


def test_z_prune_keeps_all(records):
    assert z_prune(records) == records
    assert z_prune(records, True) == records


def test_z_prune_drops_z(records):
    assert z_prune(records, False) == [{"id": "a"}, {"id": "b"}, {"id": "c"}]


def test_z_prune_selected_keys(records):
    """Only listed keys survive; an emptied z is removed."""
    assert z_prune(records, ["genes", "score"]) == [
        {"id": "a", "z": {"genes": ["A"], "score": "5 out of 5"}},
        {"id": "b"},
        {"id": "c"},
    ]
    assert z_prune(records, "species") == [
        {"id": "a", "z": {"species": "Human"}},
        {"id": "b", "z": {"species": "Mouse"}},
        {"id": "c"},
    ]


def test_z_prune_does_not_mutate(records):
    z_prune(records, False)

    assert records[0]["z"]["genes"] == ["A"]


def test_has_proper_entry_sort():
    assert not has_proper_entry_sort({})
    for bad in ([], {}, "", 45, "noResultsStr"):
        assert not has_proper_entry_sort({"sort": bad})
    for good in ("dictID", "id", "str"):
        assert has_proper_entry_sort({"sort": good})


def test_page_predicates():
    assert has_proper_page({"page": 1})
    assert not has_proper_page({"page": 0})
    assert not has_proper_page({"page": 1.0})
    assert not has_proper_page({"page": True})
    assert has_proper_per_page({"perPage": 10})
    assert not has_proper_per_page({"perPage": "10"})


def test_filter_predicates():
    assert not has_proper_filter_id({})
    assert not has_proper_filter_id({"filter": None})
    assert not has_proper_filter_id({"filter": {"id": []}})
    assert has_proper_filter_id({"filter": {"id": [""]}})

    assert requested_ids({"filter": {"id": ["", " ", "P1", 5, "P2"]}}) == ["P1", "P2"]


def test_dict_id_allowed():
    dict_id = "https://www.uniprot.org"

    assert dict_id_allowed({}, dict_id)
    assert dict_id_allowed({"filter": {"dictID": ""}}, dict_id)
    assert dict_id_allowed({"filter": {"dictID": [dict_id, "other"]}}, dict_id)
    assert not dict_id_allowed({"filter": {"dictID": ["other"]}}, dict_id)
