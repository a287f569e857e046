"""Public entry points: extract text and check the file type.

Both accept a path, a bytes-like buffer or a binary stream (or the matching
PathSource/BytesSource/StreamSource). A caller stream keeps its cursor.
"""

from __future__ import annotations

from typing import Any, Optional

from .archive import read_document_markup
from .errors import UnsupportedFormatError
from .markup import reduce_to_text
from .signature import has_valid_signature
from .source import as_source, open_stream, preserved_position


def extract(source: Any, encoding: Optional[str] = None) -> str:
    """Extract the plain text of a Word package.

    Doxygen:
    - @param source: Path, bytes or binary stream of a .docx package.
    - @param encoding: Optional codec for ``word/document.xml`` (default: BOM or UTF-8).
    - @return: Whitespace-normalized text; blank content is returned unchanged.
    - @throws MissingArgumentError: If ``source`` is None.
    - @throws SourceNotFoundError: If a path does not name an existing file.
    - @throws UnsupportedFormatError: If the input is not a readable Word package.
    - @throws TruncatedSourceError: If the signature read comes up short.
    """
    src = as_source(source)
    with open_stream(src) as stream, preserved_position(stream):
        if not has_valid_signature(stream):
            raise UnsupportedFormatError("Missing zip signature", reason="signature")
        markup = read_document_markup(stream, encoding=encoding)
    return reduce_to_text(markup)


def is_valid_file_type(source: Any) -> bool:
    """Return True if ``source`` starts with the package signature.

    Only the container is judged: a zip without ``word/document.xml`` is still
    valid here, while :func:`extract` rejects it.
    """
    src = as_source(source)
    with open_stream(src) as stream:
        return has_valid_signature(stream)
