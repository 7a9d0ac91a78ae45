from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from glossary import GlossaryEntry, GlossaryStore
from term_sorter import sort_terms


def test_store_keeps_encounter_order():
    store = GlossaryStore([GlossaryEntry("b", "2"), GlossaryEntry("a", "1")])

    assert store.terms == ["b", "a"]
    assert list(store) == ["b", "a"]
    assert len(store) == 2
    assert "a" in store
    assert "c" not in store


def test_store_duplicate_keeps_mapping_and_sequence_in_sync():
    store = GlossaryStore()
    store.add("x", "old")
    store.add("y", "why")
    store.add("x", "new")

    assert store.terms == ["x", "y"]
    assert store.definition("x") == "new"
    assert list(store.entries()) == [GlossaryEntry("x", "new"), GlossaryEntry("y", "why")]


def test_store_terms_is_a_copy():
    store = GlossaryStore([GlossaryEntry("a", "1")])
    store.terms.append("b")

    assert store.terms == ["a"]


def test_unknown_term_raises_key_error():
    with pytest.raises(KeyError):
        GlossaryStore().definition("nope")


def test_sort_terms_is_ordinal_and_case_sensitive():
    terms = ["banana", "Cherry", "apple", "Apple", "_under", "2nd", "Éclair"]

    assert sort_terms(terms) == ["2nd", "Apple", "Cherry", "_under", "apple", "banana", "Éclair"]


def test_sort_terms_returns_new_list():
    terms = ["b", "a"]

    result = sort_terms(terms)

    assert result == ["a", "b"]
    assert terms == ["b", "a"]
