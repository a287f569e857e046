"""Reduction of WordprocessingML markup to flat text.

The markup is scanned once, left to right, for three kinds of tags:

- a paragraph start carrying attributes (``<w:p w:rsidR="...">``),
- an explicit line break (``<w:br/>``),
- a text run (``<w:t>...</w:t>``), optionally with ``xml:space="preserve"``.

Paragraph starts and line breaks become a single space. Run text is appended
as is when whitespace is preserved, stripped otherwise. Everything else,
including table structure, is skipped, so table cells flatten into the
surrounding text in document order.
"""

from __future__ import annotations

import re
from typing import Iterator, List

from .model import Boundary, TextRun, Token

# group 1: paragraph start / line break; group 2: preserve flag; group 3: run text
_TOKEN_RE = re.compile(
    r'(?:(<w:p\s.*?>|<w:br/>)|<w:t(?:(?:\sxml:space="(preserve)")|\s.*?|)>(.*?)</w:t>)',
    re.IGNORECASE,
)

_BOUNDARY = Boundary()


def tokenize(markup: str) -> Iterator[Token]:
    """Yield boundary and text-run tokens from ``markup`` in source order."""
    for m in _TOKEN_RE.finditer(markup):
        if m.group(1) is not None:
            yield _BOUNDARY
        else:
            preserve = (m.group(2) or "").lower() == "preserve"
            yield TextRun(text=m.group(3), preserve_space=preserve)


def reduce_to_text(markup: str) -> str:
    """Fold the tokens of ``markup`` into one trimmed string.

    Blank markup is returned unchanged without scanning.

    Doxygen:
    - @param markup: Decoded content of ``word/document.xml``.
    - @return: Extracted text, trimmed once at both ends.
    """
    if not markup or markup.isspace():
        return markup

    parts: List[str] = []
    for token in tokenize(markup):
        if isinstance(token, TextRun):
            parts.append(token.text if token.preserve_space else token.text.strip())
        else:
            # paragraphs and breaks collapse to one space
            parts.append(" ")
    return "".join(parts).strip()
