"""
Reference document text extraction.
Turns uploaded PDF, Word and text files into the plain text stored as a
knowledge base document's extracted_text. Uses PyPDF2 and python-docx.
"""

import io
import logging
from pathlib import Path
from typing import Optional

from scope_engine.exceptions import DocumentParseError, InputValidationError
from scope_engine.models import ExtractedDocument

logger = logging.getLogger(__name__)

PDF_TYPES = {"application/pdf"}
DOCX_TYPES = {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"}
TEXT_TYPES = {"text/plain", "text/markdown"}

SUPPORTED_EXTENSIONS = [".pdf", ".docx", ".txt", ".md"]


def extract_document_text(
    content: bytes,
    filename: str,
    content_type: Optional[str] = None,
) -> ExtractedDocument:
    """
    Extract plain text from an uploaded document.

    The MIME type wins when it is recognized; otherwise the file extension
    decides.

    Raises:
        InputValidationError: unsupported file type
        DocumentParseError: the file could not be read
    """
    ext = Path(filename or "").suffix.lower()

    if content_type in PDF_TYPES or ext == ".pdf":
        reader = _parse_pdf
    elif content_type in DOCX_TYPES or ext == ".docx":
        reader = _parse_word
    elif content_type in TEXT_TYPES or ext in (".txt", ".md"):
        reader = _parse_text
    else:
        raise InputValidationError(
            f"Unsupported file type: {content_type or ext or 'unknown'}",
            details={"supported_extensions": SUPPORTED_EXTENSIONS},
        )

    try:
        text, pages = reader(content)
    except Exception as e:
        logger.error(f"[DocumentText] failed to read {filename}: {type(e).__name__}: {e}")
        raise DocumentParseError(
            f"Could not read document: {filename}",
            details={"error_type": type(e).__name__},
        ) from e

    logger.info(f"[DocumentText] {filename}: {pages} page(s), {len(text)} chars")
    return ExtractedDocument(
        filename=filename,
        text=text,
        page_count=pages,
        char_count=len(text),
    )


def _parse_pdf(content: bytes) -> tuple[str, int]:
    """Extract page text with PyPDF2."""
    from PyPDF2 import PdfReader

    reader = PdfReader(io.BytesIO(content))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n\n".join(pages).strip(), len(pages)


def _parse_word(content: bytes) -> tuple[str, int]:
    """Extract paragraphs and table rows with python-docx."""
    from docx import Document

    doc = Document(io.BytesIO(content))

    paragraphs = [para.text for para in doc.paragraphs if para.text.strip()]

    tables_text = []
    for table in doc.tables:
        rows = []
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            rows.append(" | ".join(cells))
        tables_text.append("\n".join(rows))

    all_text = "\n\n".join(paragraphs)
    if tables_text:
        all_text += "\n\n" + "\n\n".join(tables_text)

    return all_text.strip(), 1


def _parse_text(content: bytes) -> tuple[str, int]:
    """UTF-8 text; undecodable bytes become U+FFFD instead of disappearing."""
    text = content.decode("utf-8", errors="replace")
    if "\ufffd" in text:
        logger.warning("[DocumentText] text file is not valid UTF-8; replaced undecodable bytes")
    return text.strip(), 1
