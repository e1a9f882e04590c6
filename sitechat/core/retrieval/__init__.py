"""Retrieval pipeline package."""

from .rag_prompt import NO_MATCH_ANSWER, RAG_PROMPT, build_context, build_prompt
from .retrieval_pipeline import RetrievalPipeline

__all__ = [
    "NO_MATCH_ANSWER",
    "RAG_PROMPT",
    "RetrievalPipeline",
    "build_context",
    "build_prompt",
]
