"""Build a section tree from a marker-annotated document."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from htmlpartials.markers import Marker, parse_marker
from htmlpartials.naming import SectionNameRegistry, normalize_section_name
from htmlpartials.sections import Section

logger = logging.getLogger(__name__)

# Comments carrying product identification stay in the header even when they
# look like a begin marker.
_PRODUCT_COMMENT = "Product:"

# Lines end at "\n" only (str.splitlines also splits on \f, \x1c, ...).
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


@dataclass
class ParsedDocument:
    """Header text preceding the first section plus the section tree."""

    header: str
    root: Section

    @property
    def sections(self) -> list[Section]:
        return self.root.children

    def unterminated(self) -> list[Section]:
        """Sections whose end marker was never found."""
        return [section for section in self.root.walk() if section.end_comment is None]


class DocumentParser:
    """Line-oriented scanner that turns comment markers into a section tree.

    Each call to :meth:`parse` starts a new session: the name registry is
    reset so repeated runs produce the same names.
    """

    def __init__(self) -> None:
        self.names = SectionNameRegistry()
        self._stack: list[Section] = []
        self._header: list[str] = []
        self._in_header = True

    def parse(self, text: str) -> ParsedDocument:
        root = Section.root()
        self.names.reset()
        self._stack = [root]
        self._header = []
        self._in_header = True

        for line in _LINE_RE.findall(text):
            if self._in_header:
                self._consume_header_line(line)
            else:
                self._consume_body_line(line)

        for section in self._stack[1:]:
            logger.debug("Section %s has no end marker", section.full_path)
        if root.content:
            logger.debug("Discarded %d line(s) outside any section", len(root.content))

        return ParsedDocument(header="".join(self._header), root=root)

    @property
    def _current(self) -> Section:
        return self._stack[-1]

    def _consume_header_line(self, line: str) -> None:
        marker = parse_marker(line)
        if marker and marker.is_begin and _PRODUCT_COMMENT not in line:
            self._in_header = False
            self._open_section(marker, line)
        else:
            self._header.append(line)

    def _consume_body_line(self, line: str) -> None:
        marker = parse_marker(line)
        if marker is None:
            self._current.content.append(line)
        elif marker.is_begin:
            self._open_section(marker, line)
        elif marker.is_end and self._closes_current(marker):
            self._current.end_comment = line
            self._stack.pop()
        else:
            logger.debug(
                "End marker %r does not match open section %s",
                marker.name,
                self._current.full_path,
            )
            self._current.content.append(line)

    def _open_section(self, marker: Marker, line: str) -> None:
        section = Section(name=self.names.assign(marker.name), start_comment=line)
        self._current.add_child(section)
        self._stack.append(section)

    def _closes_current(self, marker: Marker) -> bool:
        # The synthetic root is never closed by a marker.
        if len(self._stack) == 1:
            return False
        # Prefix match tolerates the numeric suffix added by the registry.
        return self._current.name.startswith(normalize_section_name(marker.name))


def parse_document(text: str) -> ParsedDocument:
    """Parse ``text`` with a fresh :class:`DocumentParser`."""
    return DocumentParser().parse(text)
