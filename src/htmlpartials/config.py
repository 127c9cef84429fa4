"""Local configuration for htmlpartials."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_PARTIALS_DIR = "partials"
DEFAULT_INDEX_FILENAME = "new_index.html"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"

# Prefix used inside generated render directives. Part of the template
# contract, so it does not follow HTMLPARTIALS_PARTIALS_DIR.
RENDER_PREFIX = "partials"

HTMLPARTIALS_PARTIALS_DIR = Path(os.getenv("HTMLPARTIALS_PARTIALS_DIR", DEFAULT_PARTIALS_DIR)).expanduser()
HTMLPARTIALS_INDEX_FILENAME = Path(os.getenv("HTMLPARTIALS_INDEX_FILENAME", DEFAULT_INDEX_FILENAME)).expanduser()
HTMLPARTIALS_ENCODING = os.getenv("HTMLPARTIALS_ENCODING", DEFAULT_ENCODING)
HTMLPARTIALS_LOG_LEVEL = os.getenv("HTMLPARTIALS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
