"""Plain text extraction from Word (.docx) packages.

Exposes:
- Facade: extract, is_valid_file_type
- Input sources: PathSource, BytesSource, StreamSource
- Errors: TextExtractorError and its subclasses
- Building blocks: has_valid_signature, read_document_markup, reduce_to_text
"""

from .errors import (
    TextExtractorError,
    MissingArgumentError,
    SourceNotFoundError,
    UnsupportedFormatError,
    TruncatedSourceError,
)
from .model import PathSource, BytesSource, StreamSource
from .signature import has_valid_signature
from .archive import read_document_markup
from .markup import reduce_to_text
from .extractor import extract, is_valid_file_type

__all__ = [
    "extract",
    "is_valid_file_type",
    "PathSource",
    "BytesSource",
    "StreamSource",
    "TextExtractorError",
    "MissingArgumentError",
    "SourceNotFoundError",
    "UnsupportedFormatError",
    "TruncatedSourceError",
    "has_valid_signature",
    "read_document_markup",
    "reduce_to_text",
]
