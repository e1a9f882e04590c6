"""
Crawl service.

Fetches a page together with its site's sitemap.xml and llms.txt. The three
fetches run concurrently; only the page fetch can fail the request; the
auxiliary results are Present/Absent values and never raise.

Dependencies: asyncio, sitechat.boundary.web, sitechat.configs
System role: Crawl use case orchestration
"""

import asyncio
import logging
import re
from urllib.parse import urlsplit

from sitechat.boundary.web import Absent, AuxiliaryResult, PageFetcher, Present
from sitechat.configs.crawl import CrawlSettings
from sitechat.core.exceptions import NotFoundError, ValidationError
from sitechat.models.crawl import CrawlRequest, CrawlResponse

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim."""
    return WHITESPACE_RE.sub(" ", text).strip()


def site_origin(url: str) -> str:
    """
    Scheme and host of an absolute URL.

    Raises:
        ValidationError: URL is not absolute
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValidationError(f"URL must be absolute: {url}", field="url")
    return f"{parts.scheme}://{parts.netloc}"


def _settle(outcome: AuxiliaryResult) -> str | None:
    """Reduce an auxiliary outcome to non-blank text or None."""
    if isinstance(outcome, Present) and outcome.value.strip():
        return outcome.value
    return None


class CrawlService:
    """Fetch a page's text plus the site's auxiliary files."""

    def __init__(self, fetcher: PageFetcher, settings: CrawlSettings | None = None) -> None:
        """
        Args:
            fetcher: Page fetcher
            settings: Crawl settings (paths of the auxiliary files)
        """
        self.fetcher = fetcher
        self._settings = settings or CrawlSettings()

    async def _fetch_auxiliary(self, sitemap_url: str, llms_url: str) -> list[AuxiliaryResult]:
        outcomes = await asyncio.gather(
            self.fetcher.fetch_text(sitemap_url),
            self.fetcher.fetch_text(llms_url),
            return_exceptions=True,
        )
        # A fetcher that raises instead of returning Absent is still absorbed here
        return [
            outcome if not isinstance(outcome, BaseException) else Absent(reason=type(outcome).__name__)
            for outcome in outcomes
        ]

    async def crawl(self, request: CrawlRequest) -> CrawlResponse:
        """
        Crawl a page.

        Args:
            request: Crawl request

        Returns:
            CrawlResponse: Normalized page text with optional sitemap/llms content

        Raises:
            ValidationError: url missing or not absolute
            FetchError: Page fetch failed
            NotFoundError: Page has no text
        """
        if not request.url:
            raise ValidationError("URL is required", field="url")

        url = request.url
        origin = site_origin(url)
        sitemap_url = origin + self._settings.sitemap_path
        llms_url = origin + self._settings.llms_path
        logger.info(f"{__name__}:crawl - Fetching {url} with {sitemap_url} and {llms_url}")

        page, (sitemap, llms) = await asyncio.gather(
            self.fetcher.fetch_page(url),
            self._fetch_auxiliary(sitemap_url, llms_url),
        )

        sitemap_text = _settle(sitemap)
        llms_text = _settle(llms)
        logger.info(
            f"{__name__}:crawl - sitemap found: {sitemap_text is not None}, "
            f"llms.txt found: {llms_text is not None}"
        )

        text = normalize_whitespace(page.text or "")
        if not text:
            raise NotFoundError("No content found", url=url)

        return CrawlResponse(
            url=url,
            title=page.title or "",
            text=text,
            length=len(text),
            sitemap=sitemap_text,
            llms=llms_text,
        )
