"""
Chat model configuration settings.

Dependencies: pydantic_settings
System role: Language model configuration for answer generation
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Configuration for the Gemini chat model."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="gemini-2.5-flash-lite",
        description="Google Gemini chat model ID",
    )
    temperature: float = Field(
        default=0.2,
        description="Sampling temperature for answers",
        ge=0.0,
        le=2.0,
    )
