"""Shared pytest fixtures."""

import pytest
from unittest.mock import AsyncMock

from scope_engine.config import Settings
from scope_engine.models import (
    GenerateScopeRequest,
    GuidanceSetting,
    KnowledgeBaseDocument,
    ScopeItem,
)
from scope_engine.services import CompletionResult


def completion(text: str) -> CompletionResult:
    """CompletionResult carrying the given text."""
    return CompletionResult(text=text, model="claude-test", stop_reason="end_turn")


@pytest.fixture
def settings():
    """Settings with fixed values, independent of the environment."""
    return Settings(
        anthropic_api_key="test-key",
        claude_model="claude-test",
        scope_max_tokens=8000,
        scope_temperature=0.3,
        default_pm_hours=20,
        default_testing_hours=30,
    )


@pytest.fixture
def mock_claude_client():
    """ClaudeClient mock fixture."""
    client = AsyncMock()
    client.complete = AsyncMock(return_value=completion("[]"))
    return client


@pytest.fixture
def raw_feature_items():
    """Generator output for a login page and a dashboard (no PM/Testing items)."""
    return [
        {
            "storyId": "FEAT-001",
            "hours": 22,
            "workstream": "Frontend",
            "customerStory": "Acme Corp wants a secure login page",
            "recommendedApproach": "• Build login form\n• Integrate auth API",
            "assumptions": "• SSO not required",
            "order": 0,
        },
        {
            "storyId": "FEAT-002",
            "hours": 37,
            "workstream": "Frontend",
            "customerStory": "Acme Corp needs a dashboard of key metrics",
            "recommendedApproach": "• Design widgets\n• Wire metrics endpoints",
            "assumptions": "• Metrics API exists",
            "order": 1,
        },
    ]


@pytest.fixture
def compliant_items():
    """Five-item scope that already satisfies every list invariant."""
    return [
        ScopeItem(story_id="FEAT-001", hours=20, workstream="Frontend",
                  customer_story="Acme Corp wants a secure login page", order=0),
        ScopeItem(story_id="FEAT-002", hours=40, workstream="Frontend",
                  customer_story="Acme Corp needs a dashboard", order=1),
        ScopeItem(story_id="FEAT-003", hours=15, workstream="Backend",
                  customer_story="Acme Corp needs a metrics API", order=2),
        ScopeItem(story_id="PM-001", hours=20, workstream="Project Management",
                  customer_story="Acme Corp needs coordinated delivery", order=3),
        ScopeItem(story_id="TEST-001", hours=30, workstream="Testing & QA",
                  customer_story="Acme Corp needs the system verified", order=4),
    ]


@pytest.fixture
def guidance_settings():
    """Guidance settings deliberately supplied out of order."""
    return [
        GuidanceSetting(name="Estimation Style", content="Pad integrations by 10%.", order=2),
        GuidanceSetting(name="Tone", content="Keep stories short.", order=1),
    ]


@pytest.fixture
def knowledge_base():
    return [
        KnowledgeBaseDocument(
            title="Clinic CRM Rollout",
            company_name="Bright Dental",
            project_type="CRM",
            extracted_text="Authentication: 40 hours",
        ),
        KnowledgeBaseDocument(
            title="Marketing Site",
            company_name="Northwind",
            html_content="<p>Landing pages: 25 hours</p>",
        ),
    ]


@pytest.fixture
def generate_request():
    return GenerateScopeRequest(
        chat_transcript="Client: We need a login page and a dashboard.",
        company_name="Acme Corp",
    )
