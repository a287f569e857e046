from __future__ import annotations

import os


def write_txt(text: str, out_path: str) -> str:
    """Write extracted text to ``out_path`` as UTF-8 and return the path."""
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text or "")
    return out_path
