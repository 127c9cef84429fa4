"""Tests for reconstructing section bodies."""

from __future__ import annotations

from htmlpartials.parser import parse_document
from htmlpartials.reconstruct import is_emittable, render_include, render_section
from htmlpartials.sections import Section


class TestRenderSection:
    """Tests for render_section function."""

    def test_round_trips_simple_section(self) -> None:
        """Markers and content come back verbatim."""
        parsed = parse_document("<!-- begin: Header -->\nHi\n<!-- end: Header -->\n")
        (header,) = parsed.sections

        assert render_section(header) == "<!-- begin: Header -->\nHi\n<!-- end: Header -->\n"
        assert header.partial_name == "_header.html"

    def test_children_become_includes_after_own_content(self, sample_page: str) -> None:
        """Each child is replaced by one include line before the end marker."""
        parsed = parse_document(sample_page)
        header, main = parsed.sections

        assert render_section(header) == (
            "<!-- begin: Header -->\n"
            "<header>\n"
            "</header>\n"
            "    <%= render 'partials/_header_nav.html' %>\n"
            "<!-- end: Header -->\n"
        )
        assert render_section(main).endswith(
            "    <%= render 'partials/_main_content_nav_2.html' %>\n"
            "<!-- End of Main Content -->\n"
        )

    def test_includes_follow_child_order(self) -> None:
        """Include lines keep the order of the children."""
        parsed = parse_document(
            "<!-- begin: page -->\n"
            "<!-- begin: b -->\nB\n<!-- end: b -->\n"
            "<!-- begin: a -->\nA\n<!-- end: a -->\n"
            "<!-- end: page -->\n"
        )
        (page,) = parsed.sections

        assert render_section(page).splitlines()[1:3] == [
            "    <%= render 'partials/_page_b.html' %>",
            "    <%= render 'partials/_page_a.html' %>",
        ]

    def test_single_blank_line_is_dropped(self) -> None:
        """A lone whitespace-only content line is not emitted."""
        parsed = parse_document("<!-- begin: gap -->\n   \n<!-- end: gap -->\n")
        (gap,) = parsed.sections

        assert render_section(gap) == "<!-- begin: gap -->\n<!-- end: gap -->\n"

    def test_blank_lines_kept_among_other_content(self) -> None:
        """Blank lines survive when the section has more content."""
        parsed = parse_document("<!-- begin: a -->\n\nx\n<!-- end: a -->\n")
        assert render_section(parsed.sections[0]) == "<!-- begin: a -->\n\nx\n<!-- end: a -->\n"

    def test_marker_copies_in_content_are_skipped(self) -> None:
        """Content lines equal to a marker line are not duplicated."""
        section = Section(
            name="a",
            content=["<!-- begin: a -->\n", "x\n", "<!-- end: a -->\n"],
            start_comment="<!-- begin: a -->\n",
            end_comment="<!-- end: a -->\n",
        )
        assert render_section(section) == "<!-- begin: a -->\nx\n<!-- end: a -->\n"

    def test_unterminated_section_has_no_end_marker(self) -> None:
        """Missing end markers are simply omitted."""
        parsed = parse_document("<!-- begin: Header -->\nHi\n<!-- end: Footer -->\n")
        assert render_section(parsed.sections[0]) == (
            "<!-- begin: Header -->\nHi\n<!-- end: Footer -->\n"
        )


class TestIsEmittable:
    """Tests for is_emittable and render_include."""

    def test_section_without_anything_is_not_emittable(self) -> None:
        """A bare section with only a blank line renders to nothing."""
        assert not is_emittable(Section(name="empty", content=["\n"]))
        assert not is_emittable(Section(name="empty"))

    def test_section_with_markers_is_emittable(self) -> None:
        """Marker lines alone are enough to emit a partial."""
        assert is_emittable(Section(name="a", start_comment="<!-- begin: a -->\n"))

    def test_render_include(self) -> None:
        """The include line references the partial by path."""
        root = Section.root()
        nav = root.add_child(Section(name="header")).add_child(Section(name="nav"))
        assert render_include(nav) == "    <%= render 'partials/_header_nav.html' %>\n"
