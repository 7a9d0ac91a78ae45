#!/usr/bin/env python3
"""Data structures for glossary terms and definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List


@dataclass(frozen=True)
class GlossaryEntry:
    term: str
    definition: str


class GlossaryStore:
    """Term -> definition mapping plus the terms in the order they were read."""

    def __init__(self, entries: List[GlossaryEntry] | None = None) -> None:
        self._definitions: Dict[str, str] = {}
        self._terms: List[str] = []
        for entry in entries or []:
            self.add(entry.term, entry.definition)

    def add(self, term: str, definition: str) -> None:
        # Duplicates overwrite the definition but keep their first position.
        if term not in self._definitions:
            self._terms.append(term)
        self._definitions[term] = definition

    def definition(self, term: str) -> str:
        return self._definitions[term]

    @property
    def terms(self) -> List[str]:
        return list(self._terms)

    def entries(self) -> Iterator[GlossaryEntry]:
        for term in self._terms:
            yield GlossaryEntry(term, self._definitions[term])

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __repr__(self) -> str:
        return f"GlossaryStore({len(self)} terms)"
