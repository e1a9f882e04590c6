"""
FAISS vector store for local development.

Provides the same interface as S3VectorsStore but keeps one local FAISS index
per namespace, persisted under ``index_dir`` as ``<namespace>.faiss`` /
``<namespace>.pkl``.

Dependencies: faiss-cpu, langchain_community, sitechat.boundary.vdb.vector_schemas
System role: Local vector store for development RAG
"""

import logging
import threading
from pathlib import Path
from typing import Any

from langchain_community.vectorstores import FAISS
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from sitechat.boundary.vdb.vector_schemas import VectorSearchResult

logger = logging.getLogger(__name__)


class FAISSVectorsStore:
    """
    FAISS vector store for local development.

    Namespaces map to separate indexes, so a query never sees another
    namespace's chunks. Metadata filters are exact-match. Each namespace has
    its own lock held across load, add, save and search, so concurrent
    writers from the threadpool all land in the same index.
    """

    def __init__(self, embeddings: Embeddings, index_dir: str | Path = "/tmp/.sitechat_faiss") -> None:
        """
        Args:
            embeddings: Embedding model used for both indexing and queries
            index_dir: Directory holding the per-namespace index files
        """
        self._embeddings = embeddings
        self._index_dir = Path(index_dir)
        self._stores: dict[str, FAISS] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

        # Create index directory if it doesn't exist
        self._index_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"{__name__}:__init__ - FAISS index dir {self._index_dir}")

    def _lock_for(self, namespace: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(namespace, threading.Lock())

    def _load(self, namespace: str) -> FAISS | None:
        """Return the namespace's index, loading it from disk on first use.

        Callers hold the namespace lock.
        """
        if namespace in self._stores:
            return self._stores[namespace]

        if not (self._index_dir / f"{namespace}.faiss").exists():
            return None

        logger.info(f"{__name__}:_load - Loading index for namespace={namespace}")
        store = FAISS.load_local(
            str(self._index_dir),
            self._embeddings,
            index_name=namespace,
            allow_dangerous_deserialization=True,
        )
        self._stores[namespace] = store
        return store

    def add_documents(
        self,
        namespace: str,
        documents: list[Document],
        ids: list[str],
    ) -> list[str]:
        """
        Embed and add chunks to the namespace's index.

        Ids already present are deleted first, so re-adding an id replaces it.

        Args:
            namespace: Target namespace
            documents: Chunks to store
            ids: One id per chunk

        Returns:
            list[str]: Stored ids
        """
        with self._lock_for(namespace):
            store = self._load(namespace)
            if store is None:
                store = FAISS.from_documents(documents, self._embeddings, ids=ids)
                self._stores[namespace] = store
                added = list(ids)
            else:
                existing = set(store.index_to_docstore_id.values())
                stale = [chunk_id for chunk_id in ids if chunk_id in existing]
                if stale:
                    store.delete(ids=stale)
                added = store.add_documents(documents, ids=ids)

            store.save_local(str(self._index_dir), index_name=namespace)
        logger.info(
            f"{__name__}:add_documents - Added {len(added)} chunks",
            extra={"namespace": namespace},
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
        Search the namespace's index.

        Args:
            namespace: Namespace to search
            query: Question text
            k: Number of results to return
            filter: Exact-match metadata filter

        Returns:
            list[VectorSearchResult]: Best matches first (score is L2 distance)
        """
        with self._lock_for(namespace):
            store = self._load(namespace)
            if store is None:
                logger.info(f"{__name__}:similarity_search - Unknown namespace={namespace}")
                return []

            # Filter over the whole index so matches are never lost to fetch_k
            results = store.similarity_search_with_score(
                query,
                k=k,
                filter=filter,
                fetch_k=max(store.index.ntotal, k),
            )

        return [
            VectorSearchResult(
                chunk_id=getattr(doc, "id", None) or "",
                content=doc.page_content,
                metadata=dict(doc.metadata or {}),
                score=float(score),
            )
            for doc, score in results
        ]
