"""
Ingestion service.

Validates an ingest request, derives the namespace, assigns a document id and
runs the ingestion pipeline off the event loop.

Dependencies: sitechat.core.ingestion, fastapi.concurrency
System role: Ingest use case orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool

from sitechat.core.exceptions import ValidationError
from sitechat.core.ingestion import IngestionPipeline, WebDocument, derive_namespace
from sitechat.models.ingest import IngestRequest, IngestResponse
from sitechat.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class IngestionService:
    """Ingest page text into the namespaced vector index."""

    def __init__(self, pipeline: IngestionPipeline, index_name: str) -> None:
        """
        Args:
            pipeline: Ingestion pipeline
            index_name: Vector index name reported back to clients
        """
        self.pipeline = pipeline
        self.index_name = index_name

    async def ingest(self, request: IngestRequest) -> IngestResponse:
        """
        Ingest a page.

        Every call creates a new document id, so re-ingesting a URL adds a new
        document to the same namespace.

        Args:
            request: Ingest request

        Returns:
            IngestResponse: Namespace, document id and chunk count

        Raises:
            ValidationError: url or text missing, or url not absolute
            VectorStoreError: Upload failed
        """
        if not request.url or not request.text:
            raise ValidationError(
                "URL and text are required for ingestion",
                field="url" if not request.url else "text",
            )

        namespace = derive_namespace(request.url)
        document = WebDocument(
            text=request.text,
            url=request.url,
            title=request.title or "",
            length=request.length or len(request.text),
        )
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ingest - Ingesting into namespace={namespace}",
            url=request.url,
            doc_id=document.document_id,
            text_length=len(request.text),
        )

        result = await run_in_threadpool(self.pipeline.ingest, document, namespace)

        return IngestResponse(
            namespace=namespace,
            doc_id=document.document_id,
            index_name=self.index_name,
            success=result.success,
            chunk_count=result.chunk_count,
        )
