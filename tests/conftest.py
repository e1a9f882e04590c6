"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory fake vector store, fake chat model, sample documents
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import uuid
from typing import Any
from unittest.mock import MagicMock

import pytest
from langchain_core.documents import Document
from langchain_core.messages import AIMessage

from sitechat.boundary.vdb.vector_schemas import VectorSearchResult


class InMemoryVectorStore:
    """Namespaced vector store fake: keyword overlap instead of embeddings."""

    def __init__(self) -> None:
        self.namespaces: dict[str, dict[str, Document]] = {}
        self.add_calls: list[tuple[str, int]] = []

    def add_documents(self, namespace: str, documents: list[Document], ids: list[str]) -> list[str]:
        bucket = self.namespaces.setdefault(namespace, {})
        for chunk_id, document in zip(ids, documents):
            bucket[chunk_id] = document
        self.add_calls.append((namespace, len(documents)))
        return list(ids)

    def similarity_search(
        self,
        namespace: str,
        query: str,
        k: int,
        filter: dict[str, Any] | None = None,
    ) -> list[VectorSearchResult]:
        terms = set(query.lower().split())
        scored = []
        for chunk_id, document in self.namespaces.get(namespace, {}).items():
            if filter and any(document.metadata.get(key) != value for key, value in filter.items()):
                continue
            score = len(terms & set(document.page_content.lower().split()))
            scored.append((score, chunk_id, document))
        scored.sort(key=lambda item: (-item[0], item[1]))
        return [
            VectorSearchResult(
                chunk_id=chunk_id,
                content=document.page_content,
                metadata=dict(document.metadata),
                score=float(score),
            )
            for score, chunk_id, document in scored[:k]
        ]


@pytest.fixture
def vector_store() -> InMemoryVectorStore:
    """Provide an empty in-memory vector store."""
    return InMemoryVectorStore()


@pytest.fixture
def chat_model() -> MagicMock:
    """Provide a chat model mock that answers with a fixed message."""
    model = MagicMock()
    model.invoke.return_value = AIMessage(content="Grounded answer.")
    return model


@pytest.fixture
def page_text() -> str:
    """A ~2400 character page made of sentences."""
    sentences = [
        f"Section {i} explains how the widget handles case number {i} in detail."
        for i in range(60)
    ]
    return " ".join(sentences)[:2400]


@pytest.fixture
def doc_id() -> str:
    """Generate a test document ID."""
    return str(uuid.uuid4())
