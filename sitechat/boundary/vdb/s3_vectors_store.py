"""
S3 Vectors store for production retrieval.

One S3 Vectors index per namespace inside a single vector bucket. Chunk text is
kept in the ``text`` metadata key; ``text``, ``url`` and ``title`` are
non-filterable so the filterable metadata stays small (``documentId``,
``length``, ``chunk_index``, ``start_index``).

S3 Vectors caps total metadata per vector at 40 KB, which is the ceiling the
metadata budgeting task packs against.

Dependencies: langchain_aws, langchain_core
System role: Production vector store (S3 Vectors)
"""

import hashlib
import logging
import re
from typing import Any

from langchain_aws.vectorstores import AmazonS3Vectors
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from sitechat.boundary.vdb.vector_schemas import VectorSearchResult

logger = logging.getLogger(__name__)

TEXT_KEY = "text"
NON_FILTERABLE_KEYS = [TEXT_KEY, "url", "title"]
MAX_INDEX_NAME_LENGTH = 63


def index_name_for(namespace: str) -> str:
    """
    Map a namespace onto a valid S3 Vectors index name.

    Index names allow 3-63 lowercase letters, digits, hyphens and dots and must
    start and end with a letter or digit. Names that had to be shortened get a
    hash suffix so distinct namespaces stay distinct.
    """
    name = re.sub(r"[^a-z0-9.-]", "-", namespace.lower()).strip("-.")
    if len(name) > MAX_INDEX_NAME_LENGTH or name != namespace:
        digest = hashlib.sha256(namespace.encode("utf-8")).hexdigest()[:8]
        prefix = name[: MAX_INDEX_NAME_LENGTH - 9].rstrip("-.")
        name = f"{prefix}-{digest}" if prefix else digest
    return name.rjust(3, "0")


class S3VectorsStore:
    """
    S3 Vectors store for production retrieval.

    Wraps AmazonS3Vectors; each namespace gets its own index, created on first
    write.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        vectors_bucket: str = "sitechat-dev-vectors",
        region: str = "us-east-1",
    ) -> None:
        """
        Args:
            embeddings: Embedding model used for both indexing and queries
            vectors_bucket: S3 Vectors bucket name
            region: AWS region for S3 Vectors
        """
        self._embeddings = embeddings
        self._vectors_bucket = vectors_bucket
        self._region = region
        self._stores: dict[str, AmazonS3Vectors] = {}

    def _get_vector_store(self, namespace: str) -> AmazonS3Vectors:
        """Get or create the AmazonS3Vectors wrapper for a namespace."""
        if namespace not in self._stores:
            index_name = index_name_for(namespace)
            logger.info(
                f"{__name__}:_get_vector_store - namespace={namespace} -> index={index_name}"
            )
            self._stores[namespace] = AmazonS3Vectors(
                vector_bucket_name=self._vectors_bucket,
                index_name=index_name,
                embedding=self._embeddings,
                region_name=self._region,
                page_content_metadata_key=TEXT_KEY,
                non_filterable_metadata_keys=NON_FILTERABLE_KEYS,
            )
        return self._stores[namespace]

    def add_documents(
        self,
        namespace: str,
        documents: list[Document],
        ids: list[str],
    ) -> list[str]:
        """
        Embed and upsert chunks. S3 Vectors overwrites vectors with the same key.

        Args:
            namespace: Target namespace
            documents: Chunks to store
            ids: One id per chunk

        Returns:
            list[str]: Stored ids
        """
        vector_store = self._get_vector_store(namespace)
        added = vector_store.add_documents(documents=documents, ids=ids)
        logger.info(
            "Uploaded chunks to S3 Vectors",
            extra={
                "chunk_count": len(documents),
                "namespace": namespace,
                "bucket": self._vectors_bucket,
            },
        )
        return added

    def similarity_search(
        self,
        namespace: str,
        query: str,
        k: int,
        filter: dict[str, Any] | None = None,
    ) -> list[VectorSearchResult]:
        """
        Search one namespace with an optional metadata filter.

        Args:
            namespace: Namespace to search
            query: Question text
            k: Number of results to return
            filter: Metadata filter (S3 Vectors filter syntax)

        Returns:
            list[VectorSearchResult]: Best matches first
        """
        results = self._get_vector_store(namespace).similarity_search_with_score(
            query=query,
            k=k,
            filter=filter,
        )

        search_results = [
            VectorSearchResult(
                chunk_id=getattr(doc, "id", None) or "",
                content=doc.page_content,
                metadata=dict(doc.metadata or {}),
                score=float(score),
            )
            for doc, score in results
        ]
        logger.info(
            f"{__name__}:similarity_search - Found {len(search_results)} results",
            extra={"namespace": namespace, "k": k},
        )
        return search_results
