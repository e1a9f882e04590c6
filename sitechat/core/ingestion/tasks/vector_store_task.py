"""
Vector store upload task.

Assigns chunk ids and upserts packed chunks into a namespace. The vector store
embeds the chunk text itself.

Chunk ids depend on the re-ingestion policy:
- ``append``: hash of documentId + ordinal, so every ingestion adds new vectors
- ``replace``: hash of url + ordinal, so re-ingesting a URL overwrites the
  chunk at the same position

Dependencies: langchain_core, sitechat.boundary.vdb
System role: Final stage of document ingestion pipeline
"""

import hashlib
import logging
from typing import Literal

from langchain_core.documents import Document

from sitechat.boundary.vdb.vector_schemas import NamespacedVectorStore
from sitechat.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)

DedupPolicy = Literal["append", "replace"]


class VectorStoreTask:
    """Upsert chunks into a namespaced vector store."""

    def __init__(self, vector_store: NamespacedVectorStore, dedup_policy: DedupPolicy = "append") -> None:
        """
        Args:
            vector_store: Namespaced vector store
            dedup_policy: Re-ingestion policy ("append" or "replace")

        Raises:
            ValueError: When dedup_policy is unknown
        """
        if dedup_policy not in ("append", "replace"):
            raise ValueError(f"Unknown dedup policy: {dedup_policy}")
        self._vector_store = vector_store
        self.dedup_policy = dedup_policy

    def generate_chunk_id(self, metadata: dict, chunk_index: int) -> str:
        """
        Generate deterministic chunk ID.

        Args:
            metadata: Chunk metadata (needs documentId or url)
            chunk_index: Position of the chunk in its document

        Returns:
            str: SHA-256 hash prefix (16 chars)
        """
        key_field = "url" if self.dedup_policy == "replace" else "documentId"
        hash_input = f"{metadata.get(key_field, '')}:{chunk_index}"
        return hashlib.sha256(hash_input.encode("utf-8")).hexdigest()[:16]

    def upload(self, namespace: str, documents: list[Document], ids: list[str]) -> list[str]:
        """
        Upsert documents into a namespace.

        Args:
            namespace: Target namespace
            documents: Packed chunks
            ids: One id per chunk

        Returns:
            list[str]: Stored chunk ids

        Raises:
            ValueError: When documents list is empty
            VectorStoreError: When the store (or its embedding call) fails
        """
        if not documents:
            raise ValueError("No documents to upload")

        try:
            stored = self._vector_store.add_documents(namespace, documents, ids)
        except Exception as e:
            logger.exception(
                "Failed to upload chunks",
                extra={"namespace": namespace, "error": str(e)},
            )
            raise VectorStoreError(
                f"Failed to upload chunks: {e}",
                operation="upsert",
                details={"namespace": namespace, "chunk_count": len(documents)},
            ) from e

        logger.info(
            f"{__name__}:upload - Stored {len(stored)} chunks",
            extra={"namespace": namespace, "dedup_policy": self.dedup_policy},
        )
        return stored
