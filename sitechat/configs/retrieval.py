"""
Retrieval configuration settings.

Dependencies: pydantic_settings
System role: Query depth for grounded answers
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """How many chunks back each answer (env prefix RETRIEVAL_)."""

    model_config = SettingsConfigDict(
        env_prefix="RETRIEVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=4, description="Number of chunks used as grounding context", ge=1)
