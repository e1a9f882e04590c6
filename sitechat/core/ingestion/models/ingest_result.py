"""
Ingestion result model.

Dependencies: pydantic
System role: Ingestion pipeline output
"""

from pydantic import BaseModel, Field


class IngestResult(BaseModel):
    """Outcome of ingesting one document."""

    success: bool = Field(description="Whether every chunk was written")
    chunk_count: int = Field(description="Number of chunks written", ge=0)
    chunk_ids: list[str] = Field(default_factory=list, description="Ids of the written chunks")
    processing_time_ms: float = Field(default=0.0, description="Wall-clock duration")
