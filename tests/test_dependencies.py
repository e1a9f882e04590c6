"""
Test suite for dependency injection container.

Tests factory functions for service creation and the shared service cache.

System role: Verification of DI container
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest
from pydantic import ValidationError

from sitechat.api.deps import (
    get_chat_service,
    get_crawl_service,
    get_ingestion_service,
    get_service_cache,
)
from sitechat.api.deps.dependencies import ServiceCache
from sitechat.application.services import ChatService, CrawlService, IngestionService
from sitechat.configs import get_settings
from sitechat.configs.retrieval import RetrievalSettings


@pytest.fixture(autouse=True)
def clean_cache():
    """Start and end every test with an empty service cache."""
    get_service_cache().clear()
    yield
    get_service_cache().clear()


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_vector_store_should_be_built_once(self, vector_store) -> None:
        cache = ServiceCache()

        with patch(
            "sitechat.boundary.vdb.vector_store_factory.get_vector_store",
            return_value=vector_store,
        ) as mock_factory:
            first = cache.vector_store
            second = cache.vector_store

        assert first is second is vector_store
        mock_factory.assert_called_once()

    def test_http_client_should_be_shared(self) -> None:
        cache = ServiceCache()

        client = cache.http_client

        assert isinstance(client, httpx.AsyncClient)
        assert cache.http_client is client

    @pytest.mark.asyncio
    async def test_aclose_should_close_client_and_clear(self) -> None:
        cache = ServiceCache()
        client = cache.http_client

        await cache.aclose()

        assert client.is_closed
        assert cache.http_client is not client


class TestServiceFactories:
    """Test suite for service factory functions."""

    def test_get_ingestion_service_should_use_cached_pipeline(self, vector_store) -> None:
        cache = get_service_cache()
        cache._vector_store = vector_store

        service = get_ingestion_service()

        assert isinstance(service, IngestionService)
        assert service.pipeline is cache.ingestion_pipeline

    def test_get_chat_service_should_use_cached_pipeline(self, vector_store, chat_model: MagicMock) -> None:
        cache = get_service_cache()
        cache._vector_store = vector_store
        cache._chat_model = chat_model

        service = get_chat_service()

        assert isinstance(service, ChatService)
        assert service.retrieval_pipeline is cache.retrieval_pipeline

    def test_get_crawl_service_should_share_http_client(self) -> None:
        first = get_crawl_service()
        second = get_crawl_service()

        assert isinstance(first, CrawlService)
        assert first.fetcher._client is second.fetcher._client

    def test_retrieval_pipeline_should_read_top_k_from_retrieval_settings(
        self, vector_store, chat_model: MagicMock, monkeypatch
    ) -> None:
        monkeypatch.setenv("RETRIEVAL_TOP_K", "6")
        get_settings.cache_clear()
        cache = get_service_cache()
        cache._vector_store = vector_store
        cache._chat_model = chat_model

        try:
            assert cache.retrieval_pipeline.top_k == 6
        finally:
            get_settings.cache_clear()


class TestRetrievalSettings:
    """Test suite for RetrievalSettings."""

    def test_defaults_to_four_chunks(self, monkeypatch) -> None:
        monkeypatch.delenv("RETRIEVAL_TOP_K", raising=False)

        assert RetrievalSettings(_env_file=None).top_k == 4

    def test_rejects_zero(self) -> None:
        with pytest.raises(ValidationError):
            RetrievalSettings(_env_file=None, top_k=0)
