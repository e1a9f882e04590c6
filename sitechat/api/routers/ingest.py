"""Ingest API endpoint.

Routes:
- POST /ingest - Chunk page text and write it into the page's namespace

Dependencies: sitechat.application.services.ingestion_service
System role: Ingestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from sitechat.api.deps import get_ingestion_service
from sitechat.application.services import IngestionService
from sitechat.core.exceptions import ValidationError
from sitechat.models.ingest import IngestRequest, IngestResponse
from sitechat.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ingest"])


@router.post("/ingest", response_model=IngestResponse)
async def ingest(
    request: IngestRequest,
    ingestion_service: IngestionService = Depends(get_ingestion_service),
) -> IngestResponse:
    """Ingest a page's text.

    Args:
        request: IngestRequest with url, text and optional title/length
        ingestion_service: Injected IngestionService

    Returns:
        IngestResponse: namespace, docId, indexName and chunkCount

    Raises:
        HTTPException(400): url or text missing
        HTTPException(500): Embedding or vector store failure
    """
    try:
        return await ingestion_service.ingest(request)
    except ValidationError as e:
        logger.error(f"{__name__}:ingest - Validation failed: {e}")
        raise HTTPException(status_code=400, detail={"error": e.message, "details": e.details})
    except Exception as e:
        log_exception_with_context(logger, f"{__name__}:ingest - Request failed", e, url=request.url)
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to ingest content", "details": getattr(e, "message", str(e))},
        )
