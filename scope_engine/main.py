"""
Scope engine application entry point.
Creates and configures the FastAPI application.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scope_engine.config import get_settings
from scope_engine.api.router import api_router
from scope_engine.models import ErrorResponse
from scope_engine.exceptions import (
    ScopeEngineError,
    InputValidationError,
    ClaudeClientError,
    ScopeParseError,
    DocumentParseError,
)

logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Exception type → HTTP status. Anything else maps to 500.
ERROR_STATUS_CODES = {
    InputValidationError: 400,
    DocumentParseError: 422,
    ClaudeClientError: 502,
    ScopeParseError: 502,
}


def status_code_for(exc: ScopeEngineError) -> int:
    for exc_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown logging."""
    settings = get_settings()
    logger.info(f"Scope engine starting on {settings.host}:{settings.port}")
    logger.info(f"Completion model: {settings.claude_model}")
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not configured in settings; relying on the environment")

    yield

    logger.info("Scope engine shutting down")


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    1. Basic app info
    2. CORS
    3. Exception handlers (structured JSON errors)
    4. API routers under /api/v1
    """
    settings = get_settings()

    app = FastAPI(
        title="Scope of Work Engine",
        description="AI-assisted scope of work generation and refinement",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom exceptions become structured JSON responses
    @app.exception_handler(ScopeEngineError)
    async def scope_engine_error_handler(request: Request, exc: ScopeEngineError):
        body = ErrorResponse(
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details,
        )
        return JSONResponse(
            status_code=status_code_for(exc),
            content=body.model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        body = ErrorResponse(error_code="ERR_INTERNAL", message="Internal server error")
        return JSONResponse(status_code=500, content=body.model_dump(mode="json"))

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


@app.get("/")
async def root():
    """Basic service information."""
    return {
        "name": "Scope of Work Engine",
        "version": "1.0.0",
        "description": "Turns client conversations into scoped, estimated work items",
        "docs": "/docs",
        "api": "/api/v1",
    }


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "scope_engine.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
