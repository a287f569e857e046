"""Command-line front end: python -m textextractor --file document.docx"""

from __future__ import annotations

import sys
from typing import List, Optional

from . import (
    extract,
    is_valid_file_type,
    StreamSource,
    TextExtractorError,
)
from .txt import write_txt


def _cli(argv: Optional[List[str]] = None) -> None:
    """CLI for text extraction.

    --file / -f: Path to input .docx ('-' reads the package from stdin)
    --check: Only report whether the input is a zip package (exit 0 valid, 1 invalid)
    --out / -o: Write extracted text to this .txt file instead of stdout
    --encoding: Codec for word/document.xml (default: BOM detection, then UTF-8)
    """
    import argparse

    parser = argparse.ArgumentParser(description="Extract plain text from a Word (.docx) document.")
    parser.add_argument("--file", "-f", type=str, required=True, help="Path to input document ('-' for stdin)")
    parser.add_argument("--check", action="store_true", help="Only check the file type signature")
    parser.add_argument("--out", "-o", type=str, help="Path to save extracted text (default: print to stdout)")
    parser.add_argument("--encoding", type=str, default=None, help="Encoding of word/document.xml (default: auto)")

    args = parser.parse_args(argv)

    source = StreamSource(sys.stdin.buffer) if args.file == "-" else args.file

    try:
        if args.check:
            valid = is_valid_file_type(source)
            print("valid" if valid else "invalid")
            raise SystemExit(0 if valid else 1)
        text = extract(source, encoding=args.encoding)
    except TextExtractorError as e:
        print(f"Error: {e}")
        raise SystemExit(2)

    if args.out:
        print(f"Saved extracted text to: {write_txt(text, args.out)}")
        return
    print(text)
