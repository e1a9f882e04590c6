"""
Document ingestion pipeline orchestrator.

Coordinates chunking, metadata budgeting and the vector store upload for one
document. The vector store generates embeddings internally.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from langchain_core.documents import Document

from sitechat.boundary.vdb.vector_schemas import NamespacedVectorStore

from .configs import IngestionSettings, get_ingestion_settings
from .models import IngestResult, WebDocument
from .tasks import ChunkingTask, MetadataBudgetTask, VectorStoreTask

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Orchestrate document ingestion: chunk -> pack metadata -> embed+upsert."""

    def __init__(
        self,
        vector_store: NamespacedVectorStore,
        settings: IngestionSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            vector_store: Namespaced vector store the chunks are written to
            settings: Pipeline settings (uses defaults if None)
        """
        self._settings = settings or get_ingestion_settings()

        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._metadata_task = MetadataBudgetTask(
            limit_bytes=self._settings.metadata_limit_bytes,
            field_caps=self._settings.field_caps,
        )
        self._vector_store_task = VectorStoreTask(
            vector_store=vector_store,
            dedup_policy=self._settings.dedup_policy,
        )

    def prepare_chunks(self, document: WebDocument) -> list[Document]:
        """
        Chunk a document and fit each chunk's metadata to its budget.

        Args:
            document: Document to chunk

        Returns:
            list[Document]: Chunks ready for upload
        """
        raw_chunks = self._chunking_task.split_documents(document.text, document.shared_metadata())
        return [
            Document(
                page_content=chunk.page_content,
                metadata=self._metadata_task.pack_for_chunk(chunk.page_content, chunk.metadata),
            )
            for chunk in raw_chunks
        ]

    def ingest(self, document: WebDocument, namespace: str) -> IngestResult:
        """
        Process a document through the full pipeline.

        Not transactional: if the upload fails part-way, chunks already
        written stay in the index.

        Args:
            document: Document to ingest
            namespace: Target namespace

        Returns:
            IngestResult: Success flag and chunk count

        Raises:
            VectorStoreError: Upload (or embedding) failed
        """
        start_time = time.perf_counter()

        logger.info(
            f"{__name__}:ingest - Splitting document "
            f"(chunk_size={self._settings.chunk_size}, overlap={self._settings.chunk_overlap})",
            extra={"document_id": document.document_id, "namespace": namespace},
        )
        chunks = self.prepare_chunks(document)
        if not chunks:
            logger.info(f"{__name__}:ingest - Empty document, nothing to upload")
            return IngestResult(success=True, chunk_count=0)

        shared = document.shared_metadata()
        ids = [
            self._vector_store_task.generate_chunk_id(shared, index)
            for index in range(len(chunks))
        ]

        logger.info(f"{__name__}:ingest - Uploading {len(chunks)} chunks into namespace={namespace}")
        chunk_ids = self._vector_store_task.upload(namespace, chunks, ids)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:ingest - Completed in {elapsed_ms:.0f}ms",
            extra={"document_id": document.document_id, "chunk_count": len(chunk_ids)},
        )
        return IngestResult(
            success=True,
            chunk_count=len(chunk_ids),
            chunk_ids=chunk_ids,
            processing_time_ms=elapsed_ms,
        )
