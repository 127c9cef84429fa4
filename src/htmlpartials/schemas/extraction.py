"""Extraction output models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PartialFile(BaseModel):
    """One fragment ready to be written below the partials directory."""

    name: str
    full_path: str
    partial_name: str = Field(..., pattern=r"^_.*\.html$")
    relative_path: str = Field(..., description="POSIX path below the partials directory")
    content: str


class ExtractionResult(BaseModel):
    """Final extraction output."""

    summary: str
    sections_tree: str
    index_content: str
    partials: list[PartialFile] = Field(default_factory=list)
