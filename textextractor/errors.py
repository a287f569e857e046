from __future__ import annotations

from typing import Optional


class TextExtractorError(Exception):
    """Base class for every error raised by textextractor."""


class MissingArgumentError(TextExtractorError, ValueError):
    def __init__(self, name: str = "source") -> None:
        super().__init__(f"Argument must not be None: {name}")
        self.name = name


class SourceNotFoundError(TextExtractorError, FileNotFoundError):
    """Raised when a path input does not name an existing file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class UnsupportedFormatError(TextExtractorError, ValueError):
    """The input is not a Word package this library can read.

    Covers a signature mismatch, a container without the main document part,
    a damaged archive and an entry whose text cannot be decoded.
    """

    def __init__(self, message: str = "Unsupported file format", *, reason: Optional[str] = None) -> None:
        super().__init__(message)
        self.reason = reason


class TruncatedSourceError(TextExtractorError, EOFError):
    """A read returned fewer bytes than the source reported as available."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Unexpected end of data: expected {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual
