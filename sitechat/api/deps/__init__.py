"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_crawl_service,
    get_ingestion_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_chat_service",
    "get_crawl_service",
    "get_ingestion_service",
    "get_service_cache",
    "get_settings_dependency",
]
