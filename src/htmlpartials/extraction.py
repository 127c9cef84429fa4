"""Extraction pipeline: marker-annotated HTML -> partial templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from htmlpartials.config import (
    HTMLPARTIALS_ENCODING,
    HTMLPARTIALS_INDEX_FILENAME,
    HTMLPARTIALS_PARTIALS_DIR,
)
from htmlpartials.file_utils import ensure_dir, read_text, write_text
from htmlpartials.output_formatter import format_document
from htmlpartials.parser import DocumentParser
from htmlpartials.schemas import ExtractionResult

logger = logging.getLogger(__name__)


@dataclass
class ExtractionOptions:
    """Options for writing extracted partials.

    Attributes:
        partials_dir: Directory receiving one file per non-empty section.
        index_path: Where the rewritten top-level document is written.
        encoding: Encoding for reading the source and writing outputs.
    """

    partials_dir: Path = field(default_factory=lambda: HTMLPARTIALS_PARTIALS_DIR)
    index_path: Path = field(default_factory=lambda: HTMLPARTIALS_INDEX_FILENAME)
    encoding: str = HTMLPARTIALS_ENCODING


def extract_partials(text: str, *, source: str | None = None) -> ExtractionResult:
    """Parse ``text`` and reconstruct its partials without touching the disk."""
    parsed = DocumentParser().parse(text)
    return format_document(parsed, source=source)


def write_extraction(result: ExtractionResult, options: ExtractionOptions | None = None) -> list[Path]:
    """Write every partial and the rewritten index.

    Returns:
        Paths written, partials first (in document order) and the index last.

    Raises:
        OutputWriteError: If any output cannot be written.
    """
    opts = options or ExtractionOptions()
    ensure_dir(opts.partials_dir)

    written: list[Path] = []
    for partial in result.partials:
        target = opts.partials_dir / partial.relative_path
        write_text(target, partial.content, encoding=opts.encoding)
        logger.info("Wrote partial %s (%s)", target, partial.full_path)
        written.append(target)

    write_text(opts.index_path, result.index_content, encoding=opts.encoding)
    logger.info("Wrote index %s", opts.index_path)
    written.append(opts.index_path)
    return written


def extract_partials_from_file(
    input_path: Path,
    options: ExtractionOptions | None = None,
) -> ExtractionResult:
    """Read ``input_path``, extract its partials, and write them out.

    Raises:
        InputReadError: If the source document cannot be read.
        OutputWriteError: If any output cannot be written.
    """
    opts = options or ExtractionOptions()
    text = read_text(input_path, encoding=opts.encoding)
    result = extract_partials(text, source=input_path.name)
    write_extraction(result, opts)
    return result
