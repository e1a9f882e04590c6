"""
Crawl configuration settings.

Settings for the page fetcher and the auxiliary sitemap / llms.txt fetches.

Dependencies: pydantic_settings
System role: HTTP fetch configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CrawlSettings(BaseSettings):
    """Configuration for page and auxiliary fetches."""

    model_config = SettingsConfigDict(
        env_prefix="CRAWL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Per-request timeout for page and auxiliary fetches",
    )
    user_agent: str = Field(
        default="sitechat-crawler/0.1",
        description="User-Agent header sent with every fetch",
    )
    sitemap_path: str = Field(default="/sitemap.xml", description="Sitemap path under the site origin")
    llms_path: str = Field(default="/llms.txt", description="Site instructions path under the site origin")
