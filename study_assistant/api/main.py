"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, study_assistant.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from study_assistant.api.deps.dependencies import get_service_cache
from study_assistant.configs import get_settings
from study_assistant.core.exceptions import ConfigurationError
from study_assistant.observability.logger import configure_logging
from study_assistant.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

from .routers import documents_router, health_router, retrieval_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging(get_settings().log_level)
    logger.info("Study Assistant API starting")

    yield

    get_service_cache().clear()
    logger.info("Service cache cleared")


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Report missing configuration as service unavailable."""
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(status_code=503, content={"error": exc.message})


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Study Assistant RAG API",
        description="Upload study material and retrieve context for questions",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(retrieval_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "study_assistant.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
