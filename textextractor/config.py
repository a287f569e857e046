"""Format literals shared by the validator and the archive reader."""

# Local file header of a zip container ("PK\x03\x04").
SIGNATURE = bytes([0x50, 0x4B, 0x03, 0x04])

# Main document part of a WordprocessingML package.
DOCUMENT_PART = "word/document.xml"

DEFAULT_ENCODING = "utf-8"
