"""API routers."""

from .chat import router as chat_router
from .crawl import router as crawl_router
from .health import router as health_router
from .ingest import router as ingest_router

__all__ = [
    "chat_router",
    "crawl_router",
    "health_router",
    "ingest_router",
]
