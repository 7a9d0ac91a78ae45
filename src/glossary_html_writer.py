#!/usr/bin/env python3
"""Emit a glossary as static HTML: one page per term plus index.html."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import List

from glossary import GlossaryStore

INDEX_NAME = "index.html"

TERM_PAGE_TEMPLATE = (
    "<html>\n"
    "<head>\n"
    "<title>{term}</title>\n"
    "</head>\n"
    "<body>\n"
    '<h2><b><i><font color="red">{term}</font></i></b></h2>\n'
    "<blockquote>{definition}</blockquote><hr />\n"
    '<p>Return to <a href="index.html">index</a>.</p>\n'
    "</body>\n"
    "</html>\n"
)

INDEX_HEADER = (
    "<html>\n"
    "<head>\n"
    "<title>Glossary</title>\n"
    "<style>li{list-style: square;}</style>\n"
    "</head>\n"
    "<body>\n"
    "<h2>Glossary</h2>\n"
    "<hr /><h3>Index</h3>\n"
    "<ul>"
)
INDEX_FOOTER = "</ul>\n</body>\n</html>\n"


def term_file_name(term: str) -> str:
    # Terms are used verbatim; nothing is sanitized for the filesystem.
    return f"{term}.html"


def _write_page(target: Path, page: str) -> Path:
    # The output folder must already exist; it is never created here.
    with target.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(page)
    return target


@dataclass
class TermPageWriter:
    term: str
    definition: str

    def render(self) -> str:
        # Term and definition are embedded as-is, without HTML escaping.
        return TERM_PAGE_TEMPLATE.format(term=self.term, definition=self.definition)

    def to_html(self, out_dir: Path) -> Path:
        """Write <term>.html into out_dir."""
        return _write_page(Path(out_dir) / term_file_name(self.term), self.render())


@dataclass
class IndexPageWriter:
    terms: List[str]

    def list_items(self) -> str:
        items: list[str] = []
        for term in self.terms:
            items.append(f'<li><a href="{term_file_name(term)}">{term}</a></li>\n')
        return "".join(items)

    def render(self) -> str:
        return INDEX_HEADER + self.list_items() + INDEX_FOOTER

    def to_html(self, out_dir: Path) -> Path:
        """Write index.html linking every term, in the given order."""
        return _write_page(Path(out_dir) / INDEX_NAME, self.render())


@dataclass
class GlossaryHtmlWriter:
    store: GlossaryStore
    sorted_terms: List[str]

    def write(self, out_dir: Path) -> List[Path]:
        """Write each term page, then the index. Returns paths in write order."""
        written: List[Path] = []
        for term in self.sorted_terms:
            path = TermPageWriter(term, self.store.definition(term)).to_html(out_dir)
            logging.debug("✅ wrote %s", path)
            written.append(path)
        index_path = IndexPageWriter(self.sorted_terms).to_html(out_dir)
        logging.info("✅ wrote %s (%d terms)", index_path, len(self.sorted_terms))
        written.append(index_path)
        return written
