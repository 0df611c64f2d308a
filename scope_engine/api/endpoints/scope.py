"""
Scope of work API.
Generates a scope from a client conversation, refines an existing scope and
renders a scope list as a document. Nothing is persisted here: the calling
workflow supplies knowledge base documents and guidance settings, and stores
the returned list itself.
"""

import re
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from scope_engine.exceptions import InputValidationError
from scope_engine.layers.scope import ScopeGenerator, render_scope_html, render_scope_markdown
from scope_engine.models import (
    ExportScopeRequest,
    GenerateScopeRequest,
    RefineScopeRequest,
    ScopeItemsResponse,
    sort_scope_items,
)

router = APIRouter()


def get_scope_generator() -> ScopeGenerator:
    """Scope generator bound to the shared Claude client."""
    return ScopeGenerator()


_UNSAFE_FILENAME_CHARS = re.compile(r'[^A-Za-z0-9 ._()-]+')


def _attachment_headers(title: str, extension: str) -> dict[str, str]:
    """
    Content-Disposition for a download named after the document title.

    Header values must be latin-1, so the plain filename is reduced to safe
    ASCII and the full title travels in the RFC 5987 filename* parameter.
    """
    filename = f"{title}.{extension}"
    fallback = _UNSAFE_FILENAME_CHARS.sub("_", title).strip(" _") or "scope"
    return {
        "Content-Disposition": (
            f'attachment; filename="{fallback}.{extension}"; '
            f"filename*=UTF-8''{quote(filename, safe='')}"
        )
    }


def _require_company_name(company_name: Optional[str], action: str) -> None:
    if not company_name or not company_name.strip():
        raise InputValidationError(f"Company name is required for {action}")


@router.post("/generate", response_model=ScopeItemsResponse, response_model_by_alias=True)
async def generate_scope(
    request: GenerateScopeRequest,
    generator: ScopeGenerator = Depends(get_scope_generator),
) -> ScopeItemsResponse:
    """
    Generate a scope of work from a chat transcript.

    Requires a non-empty transcript and company name.
    """
    if not request.chat_transcript.strip():
        raise InputValidationError("Chat transcript is required")
    _require_company_name(request.company_name, "generation")

    items = await generator.generate(request)
    return ScopeItemsResponse(scope_items=items)


@router.post("/refine", response_model=ScopeItemsResponse, response_model_by_alias=True)
async def refine_scope(
    request: RefineScopeRequest,
    generator: ScopeGenerator = Depends(get_scope_generator),
) -> ScopeItemsResponse:
    """
    Refine an existing scope with a natural-language instruction.

    The response is the complete revised list; callers replace their stored
    list with it rather than merging.
    """
    if not request.refinement_instructions.strip():
        raise InputValidationError("Refinement instructions are required")
    _require_company_name(request.company_name, "refinement")

    items = await generator.refine(
        request.scope_items,
        request.refinement_instructions,
        request.guidance_settings,
        request.company_name,
    )
    return ScopeItemsResponse(scope_items=items)


@router.post("/export")
async def export_scope(
    request: ExportScopeRequest,
    format: str = "markdown",
) -> Response:
    """
    Render a scope list as a downloadable document.

    Supported formats:
    - markdown: Markdown text (.md)
    - html: standalone HTML page (.html)
    - json: sorted camelCase scope list (.json)
    """
    if format == "markdown":
        return Response(
            content=render_scope_markdown(request.scope_items, request.title),
            media_type="text/markdown",
            headers=_attachment_headers(request.title, "md"),
        )
    elif format == "html":
        return Response(
            content=render_scope_html(request.scope_items, request.title),
            media_type="text/html",
            headers=_attachment_headers(request.title, "html"),
        )
    elif format == "json":
        content = ScopeItemsResponse(
            scope_items=sort_scope_items(request.scope_items)
        ).model_dump_json(by_alias=True, indent=2)
        return Response(
            content=content,
            media_type="application/json",
            headers=_attachment_headers(request.title, "json"),
        )
    else:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported format: {format}",
        )
