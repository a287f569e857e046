"""Retrieval of the main document part from a Word package."""

from __future__ import annotations

import codecs
import zipfile
import zlib
from typing import BinaryIO, Optional

from .config import DEFAULT_ENCODING, DOCUMENT_PART
from .errors import UnsupportedFormatError


def decode_markup(data: bytes, encoding: Optional[str] = None) -> str:
    """Decode entry bytes, honoring a byte-order mark when no encoding is forced."""
    if encoding is None:
        # UTF-32 LE shares its first two bytes with the UTF-16 LE mark
        if data.startswith((codecs.BOM_UTF32_LE, codecs.BOM_UTF32_BE)):
            encoding = "utf-32"
        elif data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
            encoding = "utf-16"
        else:
            if data.startswith(codecs.BOM_UTF8):
                data = data[len(codecs.BOM_UTF8):]
            encoding = DEFAULT_ENCODING
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise UnsupportedFormatError(
            f"Cannot decode {DOCUMENT_PART} as {encoding}", reason="decode"
        ) from e


def read_document_markup(stream: BinaryIO, encoding: Optional[str] = None) -> str:
    """Open ``stream`` as a zip archive and return the text of ``word/document.xml``.

    Doxygen:
    - @param stream: Seekable binary stream whose signature already validated.
    - @param encoding: Optional codec name overriding BOM/UTF-8 detection.
    - @return: The complete decoded markup of the main document part.
    - @throws UnsupportedFormatError: If the archive is damaged, lacks the part,
      or the part cannot be decoded.
    """
    try:
        with zipfile.ZipFile(stream) as archive:
            try:
                info = archive.getinfo(DOCUMENT_PART)
            except KeyError:
                raise UnsupportedFormatError(
                    f"Archive has no {DOCUMENT_PART} entry", reason="missing-part"
                ) from None
            with archive.open(info) as entry:
                data = entry.read()
    except UnsupportedFormatError:
        raise
    except (zipfile.BadZipFile, zlib.error, NotImplementedError, EOFError, RuntimeError, ValueError) as e:
        # zipfile reports damaged headers, sizes and flags with builtin errors
        raise UnsupportedFormatError(f"Damaged or unreadable archive: {e}", reason="archive") from e
    return decode_markup(data, encoding)
