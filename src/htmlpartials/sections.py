"""Section tree model and derived path names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from htmlpartials.config import RENDER_PREFIX

ROOT_NAME = "root"
PATH_SEPARATOR = "/"


@dataclass(eq=False)
class Section:
    """A marker-delimited region of the source document.

    ``parent`` is a back-reference only; a section is owned by its parent's
    ``children`` list. ``full_path`` and ``partial_name`` are computed from the
    current tree shape on every access.
    """

    name: str
    content: list[str] = field(default_factory=list)
    children: list[Section] = field(default_factory=list)
    parent: Section | None = field(default=None, repr=False)
    start_comment: str | None = None
    end_comment: str | None = None

    @classmethod
    def root(cls) -> Section:
        return cls(name=ROOT_NAME)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def add_child(self, child: Section) -> Section:
        """Attach ``child`` as the last child of this section and return it."""
        if child.parent is not None and child.parent is not self:
            child.parent.children.remove(child)
        if child not in self.children:
            self.children.append(child)
        child.parent = self
        return child

    def ancestors(self) -> list[Section]:
        """Non-root ancestors, outermost first."""
        chain: list[Section] = []
        current = self.parent
        while current is not None and not current.is_root:
            chain.append(current)
            current = current.parent
        chain.reverse()
        return chain

    @property
    def depth(self) -> int:
        return len(self.ancestors())

    @property
    def full_path(self) -> str:
        if self.is_root or self.parent.is_root:
            return self.name
        return PATH_SEPARATOR.join([*(node.name for node in self.ancestors()), self.name])

    @property
    def partial_name(self) -> str:
        return partial_name_for(self.full_path)

    @property
    def partial_reference(self) -> str:
        return f"'{RENDER_PREFIX}/{self.partial_name}'"

    def walk(self) -> Iterator[Section]:
        """Yield descendants in document (pre-)order, excluding ``self``."""
        stack = list(reversed(self.children))
        while stack:
            section = stack.pop()
            yield section
            stack.extend(reversed(section.children))


def partial_name_for(full_path: str) -> str:
    """Derive the fragment filename for a section path."""
    return f"_{full_path.replace(PATH_SEPARATOR, '_')}.html"


def iter_sections(sections: list[Section]) -> Iterator[Section]:
    """Yield ``sections`` and all their descendants in document order."""
    for section in sections:
        yield section
        yield from section.walk()


def count_sections(sections: list[Section]) -> int:
    """Count total sections in the given subtrees."""
    return sum(1 for _ in iter_sections(sections))
