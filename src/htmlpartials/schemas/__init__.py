"""Shared schemas for htmlpartials."""

from htmlpartials.schemas.extraction import ExtractionResult, PartialFile

__all__ = ["ExtractionResult", "PartialFile"]
