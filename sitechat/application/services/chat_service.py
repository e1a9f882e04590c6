"""
Chat service for grounded Q&A over one ingested page.

Dependencies: sitechat.core.retrieval, fastapi.concurrency
System role: Chat use case orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool

from sitechat.core.exceptions import ValidationError
from sitechat.core.retrieval import RetrievalPipeline
from sitechat.models.chat import ChatRequest, ChatResponse
from sitechat.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class ChatService:
    """Answer questions about an ingested document."""

    def __init__(self, retrieval_pipeline: RetrievalPipeline) -> None:
        """
        Args:
            retrieval_pipeline: Retrieval pipeline instance
        """
        self.retrieval_pipeline = retrieval_pipeline

    async def process_chat(self, request: ChatRequest) -> ChatResponse:
        """
        Answer one question.

        Args:
            request: Chat request with question, namespace and docId

        Returns:
            ChatResponse: Model answer, or the no-match answer

        Raises:
            ValidationError: Any of the three fields missing
            VectorStoreError: Retrieval failed
            LLMError: Model call failed
        """
        missing = [
            field.alias or name
            for name, field in ChatRequest.model_fields.items()
            if not getattr(request, name)
        ]
        if missing:
            raise ValidationError(
                "Missing question, namespace, or docId",
                details={"missing": missing},
            )

        logger.info(
            f"{__name__}:process_chat - namespace={request.namespace} doc_id={request.doc_id}",
            extra={"question_preview": safe_log_value(request.question, max_length=80)},
        )
        answer = await run_in_threadpool(
            self.retrieval_pipeline.answer,
            request.question,
            request.namespace,
            request.doc_id,
        )
        return ChatResponse(answer=answer)
