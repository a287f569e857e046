from __future__ import annotations

import io
from typing import BinaryIO

from .config import SIGNATURE
from .errors import TruncatedSourceError
from .source import preserved_position


def has_valid_signature(stream: BinaryIO) -> bool:
    """Return True if the bytes at the cursor of ``stream`` are the zip signature.

    Sources shorter than the signature are reported as a mismatch. The cursor is
    restored before returning, whatever the outcome.

    Doxygen:
    - @param stream: Seekable binary stream positioned at the start of the package.
    - @return: Whether the first four bytes equal ``PK\\x03\\x04``.
    - @throws TruncatedSourceError: If the read comes up short although enough
      bytes were available.
    """
    with preserved_position(stream) as start:
        available = stream.seek(0, io.SEEK_END) - start
        if available < len(SIGNATURE):
            return False
        stream.seek(start)
        header = stream.read(len(SIGNATURE))
        if len(header) != len(SIGNATURE):
            raise TruncatedSourceError(len(SIGNATURE), len(header))
    return header == SIGNATURE
