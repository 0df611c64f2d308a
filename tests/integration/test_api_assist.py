"""
Proposal assistance and knowledge base API integration tests.
Metadata extraction, the writing copilot, document conversion and document
text extraction.
"""

import json

import pytest
from httpx import AsyncClient, ASGITransport

from scope_engine.api.endpoints.assist import (
    get_copilot_writer,
    get_document_converter,
    get_metadata_extractor,
)
from scope_engine.exceptions import ClaudeClientError
from scope_engine.layers.assist import CopilotWriter, DocumentProposalConverter, MetadataExtractor
from scope_engine.main import app
from scope_engine.services import CompletionResult


def completion(text: str) -> CompletionResult:
    return CompletionResult(text=text, model="claude-test", stop_reason="end_turn")


@pytest.fixture
async def client(mock_claude_client, settings):
    app.dependency_overrides[get_metadata_extractor] = lambda: MetadataExtractor(
        claude_client=mock_claude_client, settings=settings
    )
    app.dependency_overrides[get_copilot_writer] = lambda: CopilotWriter(
        claude_client=mock_claude_client, settings=settings
    )
    app.dependency_overrides[get_document_converter] = lambda: DocumentProposalConverter(
        claude_client=mock_claude_client, settings=settings
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# POST /api/v1/assist/extract-metadata
# ---------------------------------------------------------------------------

async def test_extract_metadata(client: AsyncClient, mock_claude_client):
    mock_claude_client.complete.return_value = completion(json.dumps({
        "title": "Customer Portal",
        "companyName": "Acme Corp",
        "contactName": None,
    }))

    response = await client.post("/api/v1/assist/extract-metadata", json={
        "chatTranscript": "Acme Corp needs a customer portal.",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Customer Portal"
    assert data["companyName"] == "Acme Corp"
    assert data["contactName"] is None


async def test_extract_metadata_failure_is_not_an_error(client: AsyncClient, mock_claude_client):
    """A failed extraction still answers 200 with every field empty."""
    mock_claude_client.complete.side_effect = ClaudeClientError("Completion service request failed")

    response = await client.post("/api/v1/assist/extract-metadata", json={
        "chatTranscript": "Acme Corp needs a customer portal.",
    })

    assert response.status_code == 200
    assert all(value is None for value in response.json().values())


async def test_extract_metadata_requires_transcript(client: AsyncClient):
    response = await client.post("/api/v1/assist/extract-metadata", json={"chatTranscript": ""})

    assert response.status_code == 400


# ---------------------------------------------------------------------------
# POST /api/v1/assist/copilot
# ---------------------------------------------------------------------------

async def test_copilot(client: AsyncClient, mock_claude_client):
    mock_claude_client.complete.return_value = completion("<p>Executive summary.</p>")

    response = await client.post("/api/v1/assist/copilot", json={
        "prompt": "Write an executive summary",
        "context": {"title": "Customer Portal", "companyName": "Acme Corp"},
    })

    assert response.status_code == 200
    assert response.json() == {"content": "<p>Executive summary.</p>"}


async def test_copilot_requires_prompt(client: AsyncClient):
    response = await client.post("/api/v1/assist/copilot", json={"prompt": ""})

    assert response.status_code == 400
    assert response.json()["message"] == "Prompt is required"


async def test_copilot_service_failure(client: AsyncClient, mock_claude_client):
    mock_claude_client.complete.side_effect = ClaudeClientError("Completion service request failed")

    response = await client.post("/api/v1/assist/copilot", json={"prompt": "Write"})

    assert response.status_code == 500
    assert response.json()["error_code"] == "ERR_GEN_001"


# ---------------------------------------------------------------------------
# POST /api/v1/assist/convert-document
# ---------------------------------------------------------------------------

async def test_convert_document(client: AsyncClient, mock_claude_client):
    mock_claude_client.complete.return_value = completion(json.dumps({
        "htmlContent": "<h1>Customer Portal</h1>",
        "metadata": {"title": "Customer Portal", "companyName": "Acme Corp"},
    }))

    response = await client.post("/api/v1/assist/convert-document", json={
        "content": "Customer Portal proposal for Acme Corp",
        "isHtml": False,
    })

    assert response.status_code == 200
    data = response.json()
    assert data["htmlContent"] == "<h1>Customer Portal</h1>"
    assert data["metadata"]["companyName"] == "Acme Corp"
    assert data["metadata"]["contactName"] is None


async def test_convert_document_requires_content(client: AsyncClient):
    response = await client.post("/api/v1/assist/convert-document", json={"content": ""})

    assert response.status_code == 400


async def test_convert_document_unparseable_response(client: AsyncClient, mock_claude_client):
    mock_claude_client.complete.return_value = completion("not json")

    response = await client.post("/api/v1/assist/convert-document", json={"content": "Body"})

    assert response.status_code == 500
    assert response.json()["error_code"] == "ERR_GEN_001"


# ---------------------------------------------------------------------------
# POST /api/v1/knowledge-base/extract
# ---------------------------------------------------------------------------

async def test_extract_text_document(client: AsyncClient):
    response = await client.post(
        "/api/v1/knowledge-base/extract",
        files={"file": ("past-scope.txt", b"Authentication: 40 hours", "text/plain")},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["filename"] == "past-scope.txt"
    assert data["text"] == "Authentication: 40 hours"
    assert data["charCount"] == 24


async def test_extract_unsupported_document(client: AsyncClient):
    response = await client.post(
        "/api/v1/knowledge-base/extract",
        files={"file": ("slides.pptx", b"PK", "application/octet-stream")},
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "ERR_INPUT_001"


async def test_extract_corrupt_pdf(client: AsyncClient):
    response = await client.post(
        "/api/v1/knowledge-base/extract",
        files={"file": ("broken.pdf", b"not a pdf", "application/pdf")},
    )

    assert response.status_code == 422
    assert response.json()["error_code"] == "ERR_DOC_001"
