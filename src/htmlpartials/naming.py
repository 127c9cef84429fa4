"""Section name normalization and document-wide disambiguation."""

from __future__ import annotations

import re
from collections import Counter

_SEPARATOR = "_"
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def normalize_section_name(name: str) -> str:
    """Normalize a free-text marker name into an identifier.

    >>> normalize_section_name("  Main Nav (top) ")
    'main_nav_top'
    """
    normalized = _NON_ALNUM_RE.sub(_SEPARATOR, name.lower())
    return normalized.strip(_SEPARATOR)


class SectionNameRegistry:
    """Hand out unique section names for one parse session.

    The first section with a given normalized base keeps the bare base; later
    ones get ``_2``, ``_3`` and so on, regardless of where they sit in the tree.
    """

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def assign(self, name: str) -> str:
        base = normalize_section_name(name)
        self._counts[base] += 1
        count = self._counts[base]
        return f"{base}{_SEPARATOR}{count}" if count > 1 else base

    def reset(self) -> None:
        self._counts.clear()
