#!/usr/bin/env python3
"""Build a static HTML glossary site from a term/definition text file."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import typer

from glossary_html_writer import GlossaryHtmlWriter
from glossary_parser import GlossaryParser
from term_sorter import sort_terms

app = typer.Typer(add_completion=False)

OUTPUT_FOLDER_PROMPT = "Input output folder name (must already exist)"
INPUT_FILE_PROMPT = "Input glossary text file"


def setup_logging(verbose: bool = False) -> None:
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    console = logging.StreamHandler()
    console.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.handlers.clear()
    root.addHandler(console)


def normalize_output_folder(folder: str) -> str:
    """Append a trailing '/' to a non-empty folder name that lacks one."""
    if folder and not folder.endswith("/"):
        return folder + "/"
    return folder


@app.command()
def main(
    output_folder: str = typer.Option(
        "",
        "--output-folder",
        prompt=OUTPUT_FOLDER_PROMPT,
        show_default=False,
        help=OUTPUT_FOLDER_PROMPT,
    ),
    input_file: str = typer.Option(..., "--input-file", prompt=INPUT_FILE_PROMPT, help=INPUT_FILE_PROMPT),
    verbose: bool = typer.Option(False, "--verbose", help="Log every page written"),
) -> None:
    """Prompt for the output folder and glossary file, then write the HTML pages."""
    setup_logging(verbose)
    run_build(output_folder, input_file)
    typer.echo("Complete.")


def run_build(output_folder: str, input_file: str) -> List[Path]:
    folder = normalize_output_folder(output_folder)
    store = GlossaryParser(input_file).parse()
    terms = sort_terms(store.terms)
    return GlossaryHtmlWriter(store, terms).write(Path(folder))


if __name__ == "__main__":
    app()
