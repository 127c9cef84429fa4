"""htmlpartials: split marker-annotated HTML into partial templates."""

from htmlpartials.exceptions import HtmlPartialsError, InputReadError, OutputWriteError
from htmlpartials.extraction import (
    ExtractionOptions,
    extract_partials,
    extract_partials_from_file,
    write_extraction,
)
from htmlpartials.parser import DocumentParser, ParsedDocument, parse_document
from htmlpartials.schemas import ExtractionResult, PartialFile
from htmlpartials.sections import Section

__all__ = [
    "DocumentParser",
    "ExtractionOptions",
    "ExtractionResult",
    "HtmlPartialsError",
    "InputReadError",
    "OutputWriteError",
    "ParsedDocument",
    "PartialFile",
    "Section",
    "extract_partials",
    "extract_partials_from_file",
    "parse_document",
    "write_extraction",
]
