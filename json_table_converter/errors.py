from __future__ import annotations

from typing import Optional


class ConverterError(Exception):
    """Base class for every error raised by the conversion pipeline."""


class ParseError(ConverterError):
    """Raised when the input text is not valid JSON.

    The decoder's message is kept verbatim; position details are exposed as
    attributes so a caller can point at the offending character.
    """

    def __init__(self, msg: str, pos: Optional[int] = None, lineno: Optional[int] = None, colno: Optional[int] = None):
        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
        super().__init__(msg)


class EmptyInputError(ConverterError):
    """Raised for blank or whitespace-only input."""

    def __init__(self, message: str = "Please enter JSON data."):
        super().__init__(message)


class NoDataError(ConverterError):
    """Raised when pivot, export or copy is requested before a conversion."""

    def __init__(self, message: str = "No data to export. Please convert JSON first."):
        super().__init__(message)


class MaxDepthExceeded(ConverterError):
    def __init__(self, max_depth: int, path: str = ''):
        self.max_depth = max_depth
        self.path = path
        where = f" at '{path}'" if path else ''
        super().__init__(f"JSON nesting exceeds the maximum depth of {max_depth}{where}.")


class ReadError(ConverterError):
    """I/O failure reported by a collaborator (file upload, clipboard)."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"An error occurred while reading the {source}: {reason}")


class UnsupportedFormatError(ConverterError, ValueError):
    def __init__(self, label):
        self.label = label
        super().__init__(f"Unknown export format: {label!r}")
