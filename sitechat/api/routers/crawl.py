"""Crawl API endpoint.

Routes:
- POST /crawl - Fetch a page's text plus the site's sitemap.xml and llms.txt

Dependencies: sitechat.application.services.crawl_service
System role: Crawl HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from sitechat.api.deps import get_crawl_service
from sitechat.application.services import CrawlService
from sitechat.core.exceptions import NotFoundError, ValidationError
from sitechat.models.crawl import CrawlRequest, CrawlResponse
from sitechat.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["crawl"])


@router.post("/crawl", response_model=CrawlResponse, response_model_exclude_none=True)
async def crawl(
    request: CrawlRequest,
    crawl_service: CrawlService = Depends(get_crawl_service),
) -> CrawlResponse:
    """Crawl a page for ingestion.

    Raises:
        HTTPException(400): url missing or not absolute
        HTTPException(404): Page has no text
        HTTPException(500): Page fetch failed
    """
    try:
        return await crawl_service.crawl(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"error": e.message, "details": e.details})
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail={"error": e.message, "details": e.details})
    except Exception as e:
        log_exception_with_context(logger, f"{__name__}:crawl - Request failed", e, url=request.url)
        raise HTTPException(
            status_code=500,
            detail={
                "error": "Failed to crawl the website",
                "details": getattr(e, "message", str(e)),
            },
        )
