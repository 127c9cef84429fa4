"""File helpers for reading the source document and writing outputs."""

from __future__ import annotations

from pathlib import Path

from htmlpartials.exceptions import InputReadError, OutputWriteError


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read the whole source document.

    Args:
        path: Path to the document.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.

    Raises:
        InputReadError: If the file is missing, unreadable, or not decodable.
    """
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Cannot read {path}: {exc}") from exc


def write_text(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write ``content`` to ``path``, creating parent directories as needed.

    Args:
        path: Destination file.
        content: Text content to write.
        encoding: Text encoding to use.

    Raises:
        OutputWriteError: If a directory or the file cannot be created.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {path}: {exc}") from exc


def ensure_dir(path: Path) -> None:
    """Create ``path`` and its parents if missing.

    Raises:
        OutputWriteError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"Cannot create directory {path}: {exc}") from exc
