"""Reference document text extraction tests."""

import io

import pytest
from docx import Document

from scope_engine.exceptions import DocumentParseError, InputValidationError
from scope_engine.services.document_text import extract_document_text


def docx_bytes() -> bytes:
    doc = Document()
    doc.add_paragraph("Clinic CRM Rollout")
    doc.add_paragraph("Authentication: 40 hours")
    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Workstream"
    table.cell(0, 1).text = "Hours"
    table.cell(1, 0).text = "CRM Setup"
    table.cell(1, 1).text = "60"
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


class TestTextFiles:
    def test_plain_text(self):
        result = extract_document_text(b"  Login page: 20 hours\n", "scope.txt")
        assert result.filename == "scope.txt"
        assert result.text == "Login page: 20 hours"
        assert result.page_count == 1
        assert result.char_count == len("Login page: 20 hours")

    def test_markdown_by_mime_type(self):
        result = extract_document_text(b"# Scope", "upload", content_type="text/markdown")
        assert result.text == "# Scope"

    def test_invalid_utf8_is_marked_not_dropped(self):
        result = extract_document_text(b"Hours \xff20", "scope.txt")
        assert result.text == "Hours \ufffd20"


class TestWordFiles:
    def test_paragraphs_and_tables(self):
        result = extract_document_text(docx_bytes(), "past-proposal.docx")
        assert "Clinic CRM Rollout" in result.text
        assert "Authentication: 40 hours" in result.text
        assert "Workstream | Hours" in result.text
        assert "CRM Setup | 60" in result.text

    def test_corrupt_docx(self):
        with pytest.raises(DocumentParseError) as exc_info:
            extract_document_text(b"definitely not a zip", "broken.docx")
        assert exc_info.value.error_code == "ERR_DOC_001"


class TestPdfFiles:
    def test_corrupt_pdf(self):
        with pytest.raises(DocumentParseError):
            extract_document_text(b"not a pdf at all", "broken.pdf")


class TestUnsupported:
    def test_unknown_extension(self):
        with pytest.raises(InputValidationError) as exc_info:
            extract_document_text(b"PK...", "slides.pptx")
        assert ".pdf" in exc_info.value.details["supported_extensions"]

    def test_no_extension_or_type(self):
        with pytest.raises(InputValidationError):
            extract_document_text(b"data", "blob")
