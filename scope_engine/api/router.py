"""
API router.
Collects the feature routers under one APIRouter.
"""

from fastapi import APIRouter

from scope_engine.api.endpoints import health, scope, assist, knowledge_base

api_router = APIRouter()

# Health check (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# Scope generation, refinement and export (/scope)
api_router.include_router(
    scope.router,
    prefix="/scope",
    tags=["scope"]
)

# Metadata extraction and writing copilot (/assist)
api_router.include_router(
    assist.router,
    prefix="/assist",
    tags=["assist"]
)

# Reference document text extraction (/knowledge-base)
api_router.include_router(
    knowledge_base.router,
    prefix="/knowledge-base",
    tags=["knowledge-base"]
)
