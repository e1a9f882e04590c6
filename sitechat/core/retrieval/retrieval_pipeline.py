"""
Retrieval pipeline.

Answers a question from one ingested document: similarity query within the
namespace (filtered by documentId), context assembly, a single model call.

Dependencies: langchain_core, sitechat.boundary.vdb
System role: Query-side RAG orchestration
"""

import logging
from typing import Any

from langchain_core.language_models import BaseChatModel

from sitechat.boundary.vdb.vector_schemas import NamespacedVectorStore, VectorSearchResult
from sitechat.core.exceptions import LLMError, VectorStoreError

from .rag_prompt import NO_MATCH_ANSWER, build_context, build_prompt

logger = logging.getLogger(__name__)

DOCUMENT_ID_KEY = "documentId"


def _message_text(message: Any) -> str:
    """Plain text of a chat model response."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    # Multi-part content: keep the text parts in order
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class RetrievalPipeline:
    """Ground a chat model's answer in a document's top-k chunks."""

    def __init__(
        self,
        vector_store: NamespacedVectorStore,
        chat_model: BaseChatModel,
        top_k: int = 4,
    ) -> None:
        """
        Args:
            vector_store: Namespaced vector store to query
            chat_model: Chat model used for the answer
            top_k: Number of chunks used as context
        """
        self._vector_store = vector_store
        self._chat_model = chat_model
        self.top_k = top_k

    def retrieve(self, question: str, namespace: str, document_id: str) -> list[VectorSearchResult]:
        """
        Fetch the document's chunks nearest to the question.

        Raises:
            VectorStoreError: When the query (or query embedding) fails
        """
        try:
            return self._vector_store.similarity_search(
                namespace,
                question,
                k=self.top_k,
                filter={DOCUMENT_ID_KEY: document_id},
            )
        except Exception as e:
            logger.error(f"{__name__}:retrieve - {type(e).__name__}: {e}")
            raise VectorStoreError(
                f"Similarity search failed: {e}",
                operation="query",
                details={"namespace": namespace, "document_id": document_id},
            ) from e

    def answer(self, question: str, namespace: str, document_id: str) -> str:
        """
        Answer a question from the document's content.

        Args:
            question: User question
            namespace: Namespace the document was ingested into
            document_id: Document to restrict retrieval to

        Returns:
            str: Model answer, or the fixed no-match answer when nothing was retrieved

        Raises:
            VectorStoreError: Retrieval failed
            LLMError: Model call failed
        """
        logger.info(
            f"{__name__}:answer - Querying namespace={namespace} for document_id={document_id}"
        )
        results = self.retrieve(question, namespace, document_id)
        if not results:
            logger.info(f"{__name__}:answer - No matches, returning fallback answer")
            return NO_MATCH_ANSWER

        prompt = build_prompt(build_context([r.content for r in results]), question)

        try:
            response = self._chat_model.invoke(prompt)
        except Exception as e:
            logger.error(f"{__name__}:answer - Model call failed: {type(e).__name__}: {e}")
            raise LLMError(f"Chat model call failed: {e}", details={"namespace": namespace}) from e

        logger.info(f"{__name__}:answer - Answered from {len(results)} chunks")
        return _message_text(response)
