"""
Application settings aggregate.

Dependencies: sitechat.configs.*
System role: Single settings object handed to the API layer
"""

from functools import lru_cache

from pydantic import Field

from sitechat.configs.base import BaseSettings
from sitechat.configs.crawl import CrawlSettings
from sitechat.configs.llm import LLMSettings
from sitechat.configs.retrieval import RetrievalSettings
from sitechat.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Process settings plus one section per external collaborator."""

    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    crawl: CrawlSettings = Field(default_factory=CrawlSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Load settings once per process.

    Usage:
        from sitechat.configs import get_settings
        index_name = get_settings().vector_store.index_name
    """
    return Settings()
