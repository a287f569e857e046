"""Normalization of the accepted input shapes into one seekable byte stream.

Every public operation funnels its argument through :func:`as_source` and then
:func:`open_stream`, so the validator and the archive reader only ever deal
with a binary stream that supports ``seek``/``tell``.
"""

from __future__ import annotations

import io
import os
from contextlib import contextmanager
from typing import Any, BinaryIO, Iterator

from .errors import MissingArgumentError, SourceNotFoundError
from .model import BytesSource, PathSource, Source, StreamSource


def as_source(value: Any) -> Source:
    """Classify ``value`` as a path, buffer or stream source.

    Doxygen:
    - @param value: A path (str or os.PathLike), a bytes-like buffer, a binary
      stream, or an already built PathSource/BytesSource/StreamSource.
    - @return: The matching source variant.
    - @throws MissingArgumentError: If ``value`` (or the variant payload) is None.
    - @throws TypeError: If ``value`` is none of the accepted shapes.
    """
    if value is None:
        raise MissingArgumentError("source")
    if isinstance(value, PathSource):
        if value.path is None:
            raise MissingArgumentError("path")
        return value
    if isinstance(value, BytesSource):
        if value.data is None:
            raise MissingArgumentError("data")
        return value
    if isinstance(value, StreamSource):
        if value.stream is None:
            raise MissingArgumentError("stream")
        return value
    if isinstance(value, (str, os.PathLike)):
        return PathSource(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BytesSource(bytes(value))
    if hasattr(value, "read"):
        return StreamSource(value)
    raise TypeError(f"Unsupported source type: {type(value).__name__}")


@contextmanager
def preserved_position(stream: BinaryIO) -> Iterator[int]:
    """Yield the current cursor of ``stream`` and seek back to it on exit."""
    start = stream.tell()
    try:
        yield start
    finally:
        stream.seek(start)


def _is_seekable(stream: Any) -> bool:
    seekable = getattr(stream, "seekable", None)
    if seekable is None:
        return hasattr(stream, "seek") and hasattr(stream, "tell")
    return bool(seekable())


@contextmanager
def open_stream(source: Source) -> Iterator[BinaryIO]:
    """Open ``source`` as a seekable binary stream for the duration of the block.

    Files opened here are closed on exit. Caller streams are never closed; a
    non-seekable caller stream is drained into memory.
    """
    if isinstance(source, PathSource):
        path = os.fspath(source.path)
        if not os.path.isfile(path):
            raise SourceNotFoundError(path)
        try:
            f = open(path, "rb")
        except FileNotFoundError:
            raise SourceNotFoundError(path) from None
        with f:
            yield f
    elif isinstance(source, BytesSource):
        with io.BytesIO(source.data) as buf:
            yield buf
    elif isinstance(source, StreamSource):
        if _is_seekable(source.stream):
            yield source.stream
        else:
            with io.BytesIO(source.stream.read()) as buf:
                yield buf
    else:
        raise TypeError(f"Unsupported source type: {type(source).__name__}")
