"""
Knowledge base document API.
Extracts plain text from an uploaded reference document so the calling
workflow can store it as a knowledge base document's extracted text.
"""

from fastapi import APIRouter, UploadFile, File

from scope_engine.models import ExtractedDocument
from scope_engine.services import extract_document_text

router = APIRouter()


@router.post("/extract", response_model=ExtractedDocument, response_model_by_alias=True)
async def extract_text(file: UploadFile = File(...)) -> ExtractedDocument:
    """
    Upload a reference document and return its text.

    Supported formats: PDF (.pdf), Word (.docx), text (.txt, .md)
    """
    content = await file.read()
    return extract_document_text(content, file.filename or "", file.content_type)
