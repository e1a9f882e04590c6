"""
Dependency injection container.

Factory functions for FastAPI dependencies. Service clients (vector store,
chat model, HTTP client) are built once per process and shared.

Dependencies: sitechat.configs, sitechat.application, sitechat.boundary, sitechat.core
System role: DI container for service injection
"""

from functools import lru_cache

import httpx

from sitechat.application.services import ChatService, CrawlService, IngestionService
from sitechat.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._vector_store = None
        self._chat_model = None
        self._ingestion_pipeline = None
        self._retrieval_pipeline = None
        self._http_client: httpx.AsyncClient | None = None

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from sitechat.boundary.vdb.vector_store_factory import get_vector_store

            self._vector_store = get_vector_store(get_settings().vector_store)
        return self._vector_store

    @property
    def chat_model(self):
        """Get cached Gemini chat model."""
        if self._chat_model is None:
            from langchain_google_genai import ChatGoogleGenerativeAI

            settings = get_settings().llm
            self._chat_model = ChatGoogleGenerativeAI(
                model=settings.model_id,
                temperature=settings.temperature,
            )
        return self._chat_model

    @property
    def ingestion_pipeline(self):
        """Get cached ingestion pipeline."""
        if self._ingestion_pipeline is None:
            from sitechat.core.ingestion import IngestionPipeline

            self._ingestion_pipeline = IngestionPipeline(vector_store=self.vector_store)
        return self._ingestion_pipeline

    @property
    def retrieval_pipeline(self):
        """Get cached retrieval pipeline."""
        if self._retrieval_pipeline is None:
            from sitechat.core.retrieval import RetrievalPipeline

            self._retrieval_pipeline = RetrievalPipeline(
                vector_store=self.vector_store,
                chat_model=self.chat_model,
                top_k=get_settings().retrieval.top_k,
            )
        return self._retrieval_pipeline

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get cached async HTTP client for page fetches."""
        if self._http_client is None:
            settings = get_settings().crawl
            self._http_client = httpx.AsyncClient(
                timeout=settings.timeout_seconds,
                headers={"User-Agent": settings.user_agent},
            )
        return self._http_client

    async def aclose(self) -> None:
        """Close network clients and clear all cached instances."""
        if self._http_client is not None:
            await self._http_client.aclose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._vector_store = None
        self._chat_model = None
        self._ingestion_pipeline = None
        self._retrieval_pipeline = None
        self._http_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_ingestion_service() -> IngestionService:
    """
    Get ingestion service instance.

    Returns:
        IngestionService: Service wired to the cached ingestion pipeline
    """
    cache = get_service_cache()
    return IngestionService(
        pipeline=cache.ingestion_pipeline,
        index_name=get_settings().vector_store.index_name,
    )


def get_chat_service() -> ChatService:
    """
    Get chat service instance.

    Uses the vector store selected via VECTOR_STORE_STORE_TYPE (FAISS for dev, S3 for prod).

    Returns:
        ChatService: Chat service with configured retrieval pipeline
    """
    return ChatService(retrieval_pipeline=get_service_cache().retrieval_pipeline)


def get_crawl_service() -> CrawlService:
    """
    Get crawl service instance.

    Returns:
        CrawlService: Crawl service using the shared HTTP client
    """
    from sitechat.boundary.web import HttpPageFetcher

    cache = get_service_cache()
    return CrawlService(
        fetcher=HttpPageFetcher(cache.http_client),
        settings=get_settings().crawl,
    )
