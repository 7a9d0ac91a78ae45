#!/usr/bin/env python3
"""Parse a glossary text file into a GlossaryStore."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from glossary import GlossaryStore


class ParseError(RuntimeError):
    """Raised when the glossary text does not follow the term/definition grammar."""


class GlossaryParser:
    """
    Read records of the form

        term
        definition line
        [more definition lines]
        <blank line>

    Definition lines are joined with a single space. The final record does
    not need a trailing blank line.
    """

    def __init__(self, source_path: Path | str) -> None:
        self.source_path = Path(source_path)

    def parse(self) -> GlossaryStore:
        with self.source_path.open("r", encoding="utf-8-sig") as fh:
            store = self.parse_lines(fh)
        logging.info("Parsed %d terms from %s", len(store), self.source_path)
        return store

    def parse_lines(self, lines: Iterable[str]) -> GlossaryStore:
        store = GlossaryStore()
        term: str | None = None
        term_line_no = 0
        definition_lines: List[str] = []

        for line_no, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            if not line.strip():
                # Blank line closes the current record; extra blanks are skipped.
                if term is not None:
                    self._add_record(store, term, term_line_no, definition_lines)
                    term = None
                continue
            if term is None:
                term = line
                term_line_no = line_no
                definition_lines = []
            else:
                definition_lines.append(line)

        if term is not None:
            self._add_record(store, term, term_line_no, definition_lines)
        return store

    def _add_record(
        self,
        store: GlossaryStore,
        term: str,
        line_no: int,
        definition_lines: List[str],
    ) -> None:
        if not definition_lines:
            raise ParseError(f"Term {term!r} on line {line_no} has no definition")
        store.add(term, " ".join(definition_lines))
