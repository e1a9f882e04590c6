"""
Crawl domain schemas.

Dependencies: pydantic
System role: Crawl API contracts
"""

from pydantic import BaseModel, Field


class CrawlRequest(BaseModel):
    """Request schema for crawling a page."""

    url: str | None = Field(default=None, description="Page URL (required)")


class CrawlResponse(BaseModel):
    """Crawled page, ready to be sent to the ingest endpoint."""

    url: str
    title: str = ""
    text: str = Field(description="Whitespace-collapsed page text")
    length: int
    sitemap: str | None = Field(default=None, description="sitemap.xml body, when the site has one")
    llms: str | None = Field(default=None, description="llms.txt body, when the site has one")
