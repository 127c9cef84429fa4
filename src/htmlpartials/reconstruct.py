"""Rebuild the renderable body of each section."""

from __future__ import annotations

from htmlpartials.sections import Section

INCLUDE_TEMPLATE = "    <%= render {reference} %>\n"


def render_include(section: Section) -> str:
    """Template directive that pulls ``section`` into its parent."""
    return INCLUDE_TEMPLATE.format(reference=section.partial_reference)


def render_section(section: Section) -> str:
    """Reassemble the markers, own content and child includes of ``section``."""
    parts: list[str] = []
    if section.start_comment:
        parts.append(section.start_comment)

    lone_line = len(section.content) == 1
    for line in section.content:
        if line == section.start_comment or line == section.end_comment:
            continue
        if lone_line and not line.strip():
            continue
        parts.append(line)

    parts.extend(render_include(child) for child in section.children)

    if section.end_comment:
        parts.append(section.end_comment)
    return "".join(parts)


def is_emittable(section: Section) -> bool:
    """Whether ``section`` renders to anything besides whitespace."""
    return bool(render_section(section).strip())
