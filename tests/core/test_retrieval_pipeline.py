"""
Test suite for RetrievalPipeline and the grounded answer prompt.

System role: Verification of query-side RAG
"""

from unittest.mock import MagicMock

import pytest
from langchain_core.documents import Document
from langchain_core.messages import AIMessage

from sitechat.core.exceptions import LLMError, VectorStoreError
from sitechat.core.retrieval import (
    NO_MATCH_ANSWER,
    RAG_PROMPT,
    RetrievalPipeline,
    build_context,
    build_prompt,
)


def seed(vector_store, namespace: str, document_id: str, texts: list[str]) -> None:
    """Store chunks for one document directly in the fake."""
    documents = [
        Document(page_content=text, metadata={"documentId": document_id, "url": "https://example.com"})
        for text in texts
    ]
    ids = [f"{document_id}-{i}" for i in range(len(texts))]
    vector_store.add_documents(namespace, documents, ids)


class TestRagPrompt:
    """Test suite for prompt helpers."""

    def test_prompt_should_take_context_and_question(self) -> None:
        assert set(RAG_PROMPT.input_variables) == {"context", "question"}

    def test_build_context_should_join_with_blank_line(self) -> None:
        assert build_context(["one", "two", "three"]) == "one\n\ntwo\n\nthree"

    def test_build_prompt_should_embed_context_and_question(self) -> None:
        prompt = build_prompt("CONTEXT BODY", "What is it?")

        assert "Context:\nCONTEXT BODY" in prompt
        assert "Question:\nWhat is it?" in prompt
        assert prompt.endswith("Answer:")


class TestRetrievalPipeline:
    """Test suite for RetrievalPipeline.answer."""

    def test_should_return_fallback_without_model_call_when_nothing_matches(
        self, vector_store, chat_model: MagicMock
    ) -> None:
        pipeline = RetrievalPipeline(vector_store, chat_model)

        answer = pipeline.answer("anything?", "empty-ns", "doc-1")

        assert answer == NO_MATCH_ANSWER
        chat_model.invoke.assert_not_called()

    def test_should_answer_from_retrieved_chunks(self, vector_store, chat_model: MagicMock) -> None:
        # Arrange
        seed(vector_store, "ns", "doc-1", ["widgets are blue", "gadgets are red"])
        pipeline = RetrievalPipeline(vector_store, chat_model)

        # Act
        answer = pipeline.answer("what color are widgets", "ns", "doc-1")

        # Assert
        assert answer == "Grounded answer."
        chat_model.invoke.assert_called_once()
        prompt = chat_model.invoke.call_args.args[0]
        assert "widgets are blue" in prompt
        assert "what color are widgets" in prompt

    def test_should_join_chunks_best_match_first(self, vector_store, chat_model: MagicMock) -> None:
        seed(vector_store, "ns", "doc-1", ["unrelated text", "widgets color blue"])
        pipeline = RetrievalPipeline(vector_store, chat_model)

        pipeline.answer("widgets color", "ns", "doc-1")

        prompt = chat_model.invoke.call_args.args[0]
        assert "widgets color blue\n\nunrelated text" in prompt

    def test_should_restrict_context_to_document(self, vector_store, chat_model: MagicMock) -> None:
        seed(vector_store, "ns", "doc-1", ["doc one widgets"])
        seed(vector_store, "ns", "doc-2", ["doc two widgets"])
        pipeline = RetrievalPipeline(vector_store, chat_model)

        pipeline.answer("widgets", "ns", "doc-2")

        prompt = chat_model.invoke.call_args.args[0]
        assert "doc two widgets" in prompt
        assert "doc one widgets" not in prompt

    def test_should_fall_back_when_document_unknown_in_namespace(
        self, vector_store, chat_model: MagicMock
    ) -> None:
        seed(vector_store, "ns", "doc-1", ["widgets"])
        pipeline = RetrievalPipeline(vector_store, chat_model)

        assert pipeline.answer("widgets", "ns", "doc-missing") == NO_MATCH_ANSWER

    def test_should_limit_context_to_top_k(self, vector_store, chat_model: MagicMock) -> None:
        seed(vector_store, "ns", "doc-1", [f"chunk number {i}" for i in range(10)])
        pipeline = RetrievalPipeline(vector_store, chat_model, top_k=4)

        pipeline.answer("chunk", "ns", "doc-1")

        prompt = chat_model.invoke.call_args.args[0]
        assert prompt.count("chunk number") == 4

    def test_should_pass_document_filter_to_store(self, chat_model: MagicMock) -> None:
        store = MagicMock()
        store.similarity_search.return_value = []
        pipeline = RetrievalPipeline(store, chat_model, top_k=4)

        pipeline.answer("q", "ns", "doc-7")

        store.similarity_search.assert_called_once_with(
            "ns", "q", k=4, filter={"documentId": "doc-7"}
        )

    def test_should_wrap_store_failure(self, chat_model: MagicMock) -> None:
        store = MagicMock()
        store.similarity_search.side_effect = RuntimeError("timeout")
        pipeline = RetrievalPipeline(store, chat_model)

        with pytest.raises(VectorStoreError) as exc_info:
            pipeline.answer("q", "ns", "doc-1")

        assert exc_info.value.details["operation"] == "query"
        chat_model.invoke.assert_not_called()

    def test_should_wrap_model_failure(self, vector_store, chat_model: MagicMock) -> None:
        seed(vector_store, "ns", "doc-1", ["widgets"])
        chat_model.invoke.side_effect = RuntimeError("quota exceeded")
        pipeline = RetrievalPipeline(vector_store, chat_model)

        with pytest.raises(LLMError):
            pipeline.answer("widgets", "ns", "doc-1")

    def test_should_join_multipart_model_content(self, vector_store, chat_model: MagicMock) -> None:
        seed(vector_store, "ns", "doc-1", ["widgets"])
        chat_model.invoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Part one. "}, {"type": "text", "text": "Part two."}]
        )
        pipeline = RetrievalPipeline(vector_store, chat_model)

        assert pipeline.answer("widgets", "ns", "doc-1") == "Part one. Part two."
