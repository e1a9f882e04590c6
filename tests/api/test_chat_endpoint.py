"""
Test suite for chat API endpoint.

Tests POST /chat with FastAPI TestClient.
Covers grounded answers, the no-match fallback and error mapping.

System role: Verification of chat HTTP API endpoint
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sitechat.api.deps import get_chat_service, get_ingestion_service
from sitechat.api.routers.chat import router
from sitechat.api.routers.ingest import router as ingest_router
from sitechat.application.services import ChatService, IngestionService
from sitechat.core.ingestion import IngestionPipeline
from sitechat.core.ingestion.configs import IngestionSettings
from sitechat.core.retrieval import NO_MATCH_ANSWER, RetrievalPipeline


@pytest.fixture
def app(vector_store, chat_model: MagicMock) -> FastAPI:
    """Create FastAPI test application with ingest and chat routers."""
    app = FastAPI()
    app.include_router(router)
    app.include_router(ingest_router)

    ingestion_service = IngestionService(
        pipeline=IngestionPipeline(vector_store, IngestionSettings(_env_file=None)),
        index_name="sitechat",
    )
    chat_service = ChatService(retrieval_pipeline=RetrievalPipeline(vector_store, chat_model))
    app.dependency_overrides[get_ingestion_service] = lambda: ingestion_service
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


class TestChatEndpoint:
    """Test suite for POST /chat."""

    def test_should_answer_after_ingest(
        self, client: TestClient, chat_model: MagicMock, page_text: str
    ) -> None:
        # Arrange
        ingested = client.post(
            "/ingest", json={"url": "https://example.com/widgets", "text": page_text}
        ).json()

        # Act
        response = client.post(
            "/chat",
            json={
                "question": "How does the widget handle case number 3?",
                "namespace": ingested["namespace"],
                "docId": ingested["docId"],
            },
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"answer": "Grounded answer."}
        prompt = chat_model.invoke.call_args.args[0]
        assert "How does the widget handle case number 3?" in prompt

    def test_should_scope_answer_to_posted_doc_id(
        self, client: TestClient, chat_model: MagicMock
    ) -> None:
        # Arrange
        client.post("/ingest", json={"url": "https://example.com/w", "text": "Alpha widgets are red."})
        second = client.post(
            "/ingest", json={"url": "https://example.com/w", "text": "Beta widgets are blue."}
        ).json()

        # Act
        response = client.post(
            "/chat",
            json={"question": "widgets", "namespace": second["namespace"], "docId": second["docId"]},
        )

        # Assert
        assert response.status_code == 200
        prompt = chat_model.invoke.call_args.args[0]
        assert "Beta widgets are blue." in prompt
        assert "Alpha" not in prompt

    def test_should_return_fallback_for_unknown_document(
        self, client: TestClient, chat_model: MagicMock
    ) -> None:
        response = client.post(
            "/chat",
            json={"question": "Anything?", "namespace": "example-com", "docId": "missing"},
        )

        assert response.status_code == 200
        assert response.json()["answer"] == NO_MATCH_ANSWER
        chat_model.invoke.assert_not_called()

    def test_should_return_400_when_fields_missing(self, client: TestClient) -> None:
        response = client.post("/chat", json={"question": "Anything?"})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "Missing question, namespace, or docId"
        assert detail["details"]["missing"] == ["namespace", "docId"]

    def test_should_return_500_when_model_fails(
        self, client: TestClient, chat_model: MagicMock, page_text: str
    ) -> None:
        ingested = client.post(
            "/ingest", json={"url": "https://example.com/widgets", "text": page_text}
        ).json()
        chat_model.invoke.side_effect = RuntimeError("quota exceeded")

        response = client.post(
            "/chat",
            json={"question": "widget", "namespace": ingested["namespace"], "docId": ingested["docId"]},
        )

        assert response.status_code == 500
        assert response.json()["detail"]["error"] == "Failed to process chat request"
