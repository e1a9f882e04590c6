"""
Chat domain models and schemas.

Request/response schemas for chat operations, plus the chat log entry kept by
clients per (namespace, doc_id).

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChatRequest(BaseModel):
    """Request schema for a question about an ingested page (``docId`` on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    question: str | None = Field(default=None, description="User question (required)")
    namespace: str | None = Field(default=None, description="Namespace from ingestion (required)")
    doc_id: str | None = Field(default=None, description="Document id from ingestion (required)")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    answer: str


class ChatMessage(BaseModel):
    """Single entry of a client-side conversation log."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    role: Literal["user", "assistant"] = Field(description="Message author")
    content: str = Field(description="Message content")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
