"""Application services."""

from .chat_service import ChatService
from .crawl_service import CrawlService
from .ingestion_service import IngestionService

__all__ = ["ChatService", "CrawlService", "IngestionService"]
