"""
Proposal assistance API: metadata extraction, the writing copilot and
document-to-proposal conversion.
"""

from fastapi import APIRouter, Depends

from scope_engine.exceptions import InputValidationError
from scope_engine.layers.assist import CopilotWriter, DocumentProposalConverter, MetadataExtractor
from scope_engine.models import (
    ConvertDocumentRequest,
    ConvertedProposal,
    CopilotRequest,
    CopilotResponse,
    ExtractedProposalMetadata,
    ExtractMetadataRequest,
)

router = APIRouter()


def get_metadata_extractor() -> MetadataExtractor:
    return MetadataExtractor()


def get_copilot_writer() -> CopilotWriter:
    return CopilotWriter()


def get_document_converter() -> DocumentProposalConverter:
    return DocumentProposalConverter()


@router.post(
    "/extract-metadata",
    response_model=ExtractedProposalMetadata,
    response_model_by_alias=True,
)
async def extract_metadata(
    request: ExtractMetadataRequest,
    extractor: MetadataExtractor = Depends(get_metadata_extractor),
) -> ExtractedProposalMetadata:
    """Extract title, company, contact and timeline from a transcript."""
    if not request.chat_transcript.strip():
        raise InputValidationError("Chat transcript is required")
    return await extractor.extract(request.chat_transcript)


@router.post("/copilot", response_model=CopilotResponse)
async def copilot(
    request: CopilotRequest,
    writer: CopilotWriter = Depends(get_copilot_writer),
) -> CopilotResponse:
    """Write or rewrite proposal content as HTML."""
    content = await writer.respond(
        request.prompt,
        request.current_content,
        request.context,
    )
    return CopilotResponse(content=content)


@router.post(
    "/convert-document",
    response_model=ConvertedProposal,
    response_model_by_alias=True,
)
async def convert_document(
    request: ConvertDocumentRequest,
    converter: DocumentProposalConverter = Depends(get_document_converter),
) -> ConvertedProposal:
    """
    Restructure an ingested document into proposal HTML plus metadata.

    Pair with /knowledge-base/extract to turn an uploaded file into text first.
    """
    return await converter.convert(request.content, request.is_html)
