"""Test setup for htmlpartials."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_page() -> str:
    """A small page with a header, nested sections, and a repeated name."""
    return (
        "<!DOCTYPE html>\n"
        "<!-- Product: Storefront 2.1 -->\n"
        "<html>\n"
        "  <body>\n"
        "<!-- begin: Header -->\n"
        "<header>\n"
        "<!-- begin: Nav -->\n"
        "<nav>links</nav>\n"
        "<!-- end: Nav -->\n"
        "</header>\n"
        "<!-- end: Header -->\n"
        "<!-- begin: Main Content -->\n"
        "<main>\n"
        "<!-- begin: Nav -->\n"
        "<nav>side</nav>\n"
        "<!-- end: Nav -->\n"
        "</main>\n"
        "<!-- End of Main Content -->\n"
    )
