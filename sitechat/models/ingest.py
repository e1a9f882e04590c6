"""
Ingest domain schemas.

Request/response schemas for ingest operations. Required fields are optional
at the schema level so missing values surface as 400 errors from the service
rather than 422 schema errors.

Dependencies: pydantic
System role: Ingest API contracts
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IngestRequest(BaseModel):
    """Request schema for ingesting a page's text."""

    url: str | None = Field(default=None, description="Source URL (required)")
    title: str | None = Field(default=None, description="Page title")
    text: str | None = Field(default=None, description="Normalized page text (required)")
    length: int | None = Field(default=None, description="Text length; defaults to len(text)")


class IngestResponse(BaseModel):
    """Response schema for a completed ingestion, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    namespace: str = Field(description="Namespace the chunks were written to")
    doc_id: str = Field(description="Document id used to scope chat queries")
    index_name: str = Field(description="Vector index name")
    success: bool
    chunk_count: int
