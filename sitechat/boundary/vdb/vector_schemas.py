"""
Vector database schemas.

The interface every vector store implements, plus the search result model.

Dependencies: pydantic, langchain_core
System role: Type definitions for vector operations
"""

from typing import Any, Protocol

from langchain_core.documents import Document
from pydantic import BaseModel, Field


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    chunk_id: str = Field(default="", description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")
    score: float = Field(description="Store-specific relevance score")

    @property
    def document_id(self) -> str | None:
        return self.metadata.get("documentId")


class NamespacedVectorStore(Protocol):
    """A vector index partitioned by namespace."""

    def add_documents(
        self,
        namespace: str,
        documents: list[Document],
        ids: list[str],
    ) -> list[str]:
        """Embed and upsert chunks into ``namespace``; existing ids are overwritten."""
        ...

    def similarity_search(
        self,
        namespace: str,
        query: str,
        k: int,
        filter: dict[str, Any] | None = None,
    ) -> list[VectorSearchResult]:
        """Return up to ``k`` chunks of ``namespace`` nearest to ``query``, best first."""
        ...
