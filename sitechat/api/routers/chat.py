"""Chat API endpoint.

Routes:
- POST /chat - Answer a question from one ingested document

Dependencies: sitechat.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from sitechat.api.deps import get_chat_service
from sitechat.application.services import ChatService
from sitechat.core.exceptions import ValidationError
from sitechat.models.chat import ChatRequest, ChatResponse
from sitechat.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer a question grounded in an ingested document.

    Returns the fixed no-match answer (200) when nothing relevant is stored.

    Raises:
        HTTPException(400): question, namespace or docId missing
        HTTPException(500): Retrieval or model failure
    """
    try:
        return await chat_service.process_chat(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"error": e.message, "details": e.details})
    except Exception as e:
        log_exception_with_context(
            logger, f"{__name__}:chat - Request failed", e, namespace=request.namespace
        )
        raise HTTPException(
            status_code=500,
            detail={
                "error": "Failed to process chat request",
                "details": getattr(e, "message", str(e)),
            },
        )
