from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO, Union


@dataclass(frozen=True)
class PathSource:
    path: Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class BytesSource:
    data: bytes


@dataclass(frozen=True)
class StreamSource:
    stream: BinaryIO


Source = Union[PathSource, BytesSource, StreamSource]


@dataclass(frozen=True)
class Boundary:
    """Paragraph start or explicit line break."""


@dataclass(frozen=True)
class TextRun:
    text: str
    preserve_space: bool = False


Token = Union[Boundary, TextRun]
