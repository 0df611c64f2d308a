"""
Health check endpoints.
"""

from fastapi import APIRouter

from scope_engine.config import get_settings

router = APIRouter()


@router.get("")
async def health_check():
    """Returns {"status": "healthy"} while the server is up."""
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """Health plus the active completion settings (never the key itself)."""
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "claude_model": settings.claude_model,
            "scope_temperature": settings.scope_temperature,
            "scope_max_tokens": settings.scope_max_tokens,
            "api_key_configured": bool(settings.anthropic_api_key),
        }
    }
