"""
Base configuration settings.

Service-wide options shared by the API process. Component settings
(vector store, LLM, crawl) carry their own env prefixes.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Process-level settings read from the environment or .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", description="Deployment stage name")
    log_level: str = Field(default="INFO", description="Root log level for configure_logging")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API (the browser extension runs cross-origin)",
    )
