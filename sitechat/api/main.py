"""
FastAPI application for crawl, ingest and chat.

Dependencies: fastapi, uvicorn, sitechat.api.routers
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sitechat import __version__
from sitechat.api.deps.dependencies import get_service_cache
from sitechat.configs import get_settings
from sitechat.observability.logger import configure_logging, get_logger
from sitechat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    chat_router,
    crawl_router,
    health_router,
    ingest_router,
)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup; close shared clients on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = get_logger("uvicorn")
    logger.info(f"sitechat {__version__} starting ({settings.environment})")

    yield

    await get_service_cache().aclose()
    logger.info("Shared clients closed")


def create_app() -> FastAPI:
    """
    Build the application with middleware and versioned routers.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="sitechat RAG API",
        description="Ingest web pages into a namespaced vector index and chat with them",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Outermost: correlation, then request logging, then CORS
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    for router in (health_router, crawl_router, ingest_router, chat_router):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("sitechat.api.main:app", host="0.0.0.0", port=8000)
