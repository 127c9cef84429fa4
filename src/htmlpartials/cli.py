"""Command-line entry point for htmlpartials.

Usage:
  htmlpartials INDEX_HTML

Splits INDEX_HTML into one partial per marked section below ``partials/``
and writes the rewritten document to ``new_index.html``. Both locations can
be changed with HTMLPARTIALS_PARTIALS_DIR and HTMLPARTIALS_INDEX_FILENAME.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from htmlpartials.config import HTMLPARTIALS_LOG_LEVEL
from htmlpartials.exceptions import HtmlPartialsError
from htmlpartials.extraction import ExtractionOptions, extract_partials_from_file

logger = logging.getLogger(__name__)


def setup_logging(level: str = HTMLPARTIALS_LOG_LEVEL) -> None:
    """Set up logging for command-line runs."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlpartials",
        description="Split a marker-annotated HTML document into partial templates.",
    )
    parser.add_argument("input", type=Path, help="The [index].html file to split")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    options = ExtractionOptions()
    try:
        result = extract_partials_from_file(args.input, options)
    except HtmlPartialsError as exc:
        logger.error("%s", exc)
        return 1

    for partial in result.partials:
        print(f"Created partial: {partial.partial_name} (full path: {partial.full_path})")
    print(result.sections_tree)
    print(result.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
