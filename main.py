"""
Entry point for running from a source checkout.

    python main.py --file path/to/document.docx

The installed console script and ``python -m textextractor`` use the same CLI.
"""

from textextractor.cli import _cli

if __name__ == "__main__":
    _cli()
