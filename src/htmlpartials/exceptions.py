"""Custom exceptions for htmlpartials."""


class HtmlPartialsError(Exception):
    """Base exception for htmlpartials operations."""


class InputReadError(HtmlPartialsError):
    """Error while reading the source document."""


class OutputWriteError(HtmlPartialsError):
    """Error while writing partials or the rewritten index."""
