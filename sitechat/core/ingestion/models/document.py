"""
Ingested document model.

Dependencies: pydantic
System role: Immutable input of one ingestion call
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WebDocument(BaseModel):
    """A page's text plus the fields shared by all of its chunks."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Normalized page text")
    url: str = Field(description="Source URL")
    title: str = Field(default="", description="Page title")
    length: int = Field(default=0, description="Text length in characters (defaults to len(text))")
    document_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique id of this ingestion",
    )

    @model_validator(mode="before")
    @classmethod
    def _default_length(cls, data):
        if isinstance(data, dict) and not data.get("length"):
            data = {**data, "length": len(data.get("text") or "")}
        return data

    def shared_metadata(self) -> dict:
        """Metadata carried by every chunk of this document."""
        return {
            "url": self.url,
            "title": self.title,
            "length": self.length,
            "documentId": self.document_id,
        }
