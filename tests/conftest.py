import io
import zipfile

import pytest
from docx import Document as DocxDocument
from docx.oxml.ns import qn

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types"/>'
)


def _stamp_revision_ids(doc) -> None:
    # Word writes rsid attributes on every paragraph; python-docx does not.
    for i, p in enumerate(doc.element.body.iter(qn("w:p"))):
        p.set(qn("w:rsidR"), f"{0x00A10000 + i:08X}")


def build_zip(entries) -> bytes:
    """Return zip bytes holding ``entries`` (name -> str or bytes)."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buf.getvalue()


def build_package(document_xml) -> bytes:
    return build_zip({"[Content_Types].xml": CONTENT_TYPES, "word/document.xml": document_xml})


@pytest.fixture
def save_docx(tmp_path):
    """Save a python-docx document the way Word would and return its path."""

    def _save(doc, name="document.docx"):
        _stamp_revision_ids(doc)
        path = tmp_path / name
        doc.save(str(path))
        return path

    return _save


@pytest.fixture
def valid_docx(save_docx):
    doc = DocxDocument()
    doc.add_paragraph("This is a Word document.")
    return save_docx(doc, "Valid.docx")


@pytest.fixture
def preserve_docx(save_docx):
    doc = DocxDocument()
    # leading/trailing spaces make python-docx emit xml:space="preserve"
    doc.add_paragraph("  This is a Word document.  ")
    return save_docx(doc, "ValidWithWhitespacePreserve.docx")


@pytest.fixture
def formatting_docx(save_docx):
    doc = DocxDocument()
    doc.add_paragraph("This is a Word document.")
    p = doc.add_paragraph()
    p.add_run("It spans over multiple").add_break()
    p.add_run("paragraphs with line breaks.")
    p = doc.add_paragraph()
    p.add_run("It also has ")
    p.add_run("some basic").bold = True
    p.add_run(" formatting.")
    return save_docx(doc, "ValidWithFormatting.docx")


@pytest.fixture
def tables_docx(save_docx):
    doc = DocxDocument()
    doc.add_heading("Heading 1", level=1)
    doc.add_paragraph("This is a document.")
    table = doc.add_table(rows=3, cols=3)
    for col in range(3):
        table.cell(0, col).text = f"Column {col + 1}"
    for row in range(1, 3):
        for col in range(3):
            table.cell(row, col).text = f"Cell {row}x{col + 1}"
    return save_docx(doc, "ValidWithTables.docx")


@pytest.fixture
def write_bytes(tmp_path):
    def _write(data: bytes, name="input.docx"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
