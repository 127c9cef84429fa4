"""Recognize begin/end section markers in single-line HTML comments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_COMMENT_OPEN = "<!--"
_COMMENT_CLOSE = "-->"
_COMMENT_RE = re.compile(r"<!--\s*(.+?)\s*-->")

_BEGIN_PREFIX = "begin:"
_END_PREFIX = "end:"
_LEGACY_END_PREFIX = "End of"


class MarkerKind(str, Enum):
    """Kind of section marker."""

    BEGIN = "begin"
    END = "end"


@dataclass(frozen=True)
class Marker:
    """A recognized section marker and the free-text name it carries."""

    kind: MarkerKind
    name: str

    @property
    def is_begin(self) -> bool:
        return self.kind is MarkerKind.BEGIN

    @property
    def is_end(self) -> bool:
        return self.kind is MarkerKind.END


def extract_comment_text(line: str) -> str | None:
    """Return the trimmed text of the first comment on ``line``, if any."""
    if _COMMENT_OPEN not in line or _COMMENT_CLOSE not in line:
        return None
    match = _COMMENT_RE.search(line)
    if not match:
        return None
    return match.group(1).strip()


def parse_marker(line: str) -> Marker | None:
    """Classify ``line`` as a begin marker, an end marker, or neither.

    Recognized forms, checked in order:

    1. ``<!-- begin: NAME -->``
    2. ``<!-- end: NAME -->``
    3. ``<!-- End of NAME -->``
    4. ``<!-- NAME -->`` where the text contains neither ``end`` nor
       ``End of``; treated as an implicit begin marker.

    Any other comment (for example ``<!-- append here -->``, which contains
    ``end``) is not a marker. Comments spanning several lines are never seen.
    """
    text = extract_comment_text(line)
    if text is None:
        return None

    if text.startswith(_BEGIN_PREFIX):
        return Marker(MarkerKind.BEGIN, text[len(_BEGIN_PREFIX):].strip())
    if text.startswith(_END_PREFIX):
        return Marker(MarkerKind.END, text[len(_END_PREFIX):].strip())
    if text.startswith(_LEGACY_END_PREFIX):
        return Marker(MarkerKind.END, text[len(_LEGACY_END_PREFIX):].strip())
    if "end" not in text and _LEGACY_END_PREFIX not in text:
        return Marker(MarkerKind.BEGIN, text)
    return None
