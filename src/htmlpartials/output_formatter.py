"""Format a parsed document into partial files, index, tree, and summary."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from htmlpartials.parser import ParsedDocument
from htmlpartials.reconstruct import is_emittable, render_include, render_section
from htmlpartials.schemas import ExtractionResult, PartialFile
from htmlpartials.sections import PATH_SEPARATOR, Section, count_sections, iter_sections

logger = logging.getLogger(__name__)

_CLOSING_TAGS = ("</body>", "</html>")
_CLOSING_FALLBACK = "  </body>\n</html>\n"


def format_document(parsed: ParsedDocument, *, source: str | None = None) -> ExtractionResult:
    """Create partial files, the rewritten index, section tree, and summary."""
    partials = collect_partials(parsed.sections)
    tree = "Sections:\n" + create_sections_tree(parsed.sections)
    index_content = render_index(parsed.header, parsed.sections)

    summary_lines = []
    if source:
        summary_lines.append(f"Source: {source}")
    summary_lines.append(f"Sections: {count_sections(parsed.sections)}")
    summary_lines.append(f"Partials: {len(partials)}")
    unterminated = parsed.unterminated()
    if unterminated:
        summary_lines.append(f"Unterminated: {len(unterminated)}")

    return ExtractionResult(
        summary="\n".join(summary_lines),
        sections_tree=tree,
        index_content=index_content,
        partials=partials,
    )


def collect_partials(sections: list[Section]) -> list[PartialFile]:
    """Reconstruct every emittable section, parents before children."""
    partials: list[PartialFile] = []
    for section in iter_sections(sections):
        if is_emittable(section):
            partials.append(_to_partial_file(section))
        else:
            logger.debug("Skipped empty section %s", section.full_path)
    return partials


def partial_relative_path(section: Section) -> PurePosixPath:
    """Location of the fragment file relative to the partials directory.

    Every path segment except the last becomes a subdirectory.
    """
    folders = section.full_path.split(PATH_SEPARATOR)[:-1]
    return PurePosixPath(*folders, section.partial_name)


def render_index(header: str, sections: list[Section]) -> str:
    """Rebuild the top-level document from its header and top-level includes."""
    content = header
    if not content.endswith("\n"):
        content += "\n"

    for section in sections:
        if is_emittable(section):
            content += render_include(section)

    if not all(tag in content for tag in _CLOSING_TAGS):
        content += _CLOSING_FALLBACK
    return content


def create_sections_tree(sections: list[Section]) -> str:
    return "\n".join(
        "  " * section.depth + f"- {section.full_path} -> {section.partial_name}"
        for section in iter_sections(sections)
    )


def _to_partial_file(section: Section) -> PartialFile:
    return PartialFile(
        name=section.name,
        full_path=section.full_path,
        partial_name=section.partial_name,
        relative_path=partial_relative_path(section).as_posix(),
        content=render_section(section),
    )
