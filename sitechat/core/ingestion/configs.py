"""
Configuration settings for the ingestion pipeline.

Provides environment-based configuration for chunking, metadata budgeting,
and re-ingestion policy.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IngestionSettings(BaseSettings):
    """Settings for document ingestion."""

    model_config = SettingsConfigDict(
        env_prefix="INGESTION_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=800,
        description="Maximum chunk size in characters",
        gt=0,
    )
    chunk_overlap: int = Field(
        default=100,
        description="Overlap between consecutive chunks",
        ge=0,
    )

    # Metadata budget
    metadata_limit_bytes: int = Field(
        default=40_000,
        description="Provider ceiling for serialized metadata plus chunk text",
    )
    max_url_length: int = Field(default=2000, description="Hard cap for the url field")
    max_title_length: int = Field(default=1000, description="Hard cap for the title field")

    dedup_policy: Literal["append", "replace"] = Field(
        default="append",
        description=(
            "'append' keeps earlier ingestions of a URL alongside the new one; "
            "'replace' overwrites chunks at the same position for the same URL"
        ),
    )

    @property
    def field_caps(self) -> dict[str, int]:
        """Per-field character caps applied before budgeting."""
        return {"url": self.max_url_length, "title": self.max_title_length}


@lru_cache
def get_ingestion_settings() -> IngestionSettings:
    """
    Get cached ingestion settings instance.

    Returns:
        IngestionSettings: Singleton settings loaded from environment
    """
    return IngestionSettings()
