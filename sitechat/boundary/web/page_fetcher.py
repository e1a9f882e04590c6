"""
HTTP page fetcher.

Fetches a page and extracts its visible text and title, and fetches auxiliary
site files (sitemap.xml, llms.txt) as best-effort text.

The primary fetch raises on failure; auxiliary fetches never raise and return
``Present(text)`` or ``Absent(reason)`` instead. Any object with the same
``fetch_page`` coroutine (e.g. a headless browser) can replace HttpPageFetcher.

Dependencies: httpx, beautifulsoup4
System role: Web boundary for the crawl flow
"""

import logging
from dataclasses import dataclass
from typing import Protocol, Union

import httpx
from bs4 import BeautifulSoup

from sitechat.core.exceptions import FetchError

logger = logging.getLogger(__name__)

NON_CONTENT_TAGS = ["script", "style", "noscript", "template", "svg"]


@dataclass(frozen=True)
class FetchedPage:
    """Visible text and title of a fetched page."""

    url: str
    title: str
    text: str


@dataclass(frozen=True)
class Present:
    """An auxiliary fetch that returned content."""

    value: str


@dataclass(frozen=True)
class Absent:
    """An auxiliary fetch that produced nothing."""

    reason: str = ""


AuxiliaryResult = Union[Present, Absent]


class PageFetcher(Protocol):
    async def fetch_page(self, url: str) -> FetchedPage: ...

    async def fetch_text(self, url: str) -> AuxiliaryResult: ...


def extract_page(url: str, html: str) -> FetchedPage:
    """
    Extract title and visible body text from HTML.

    Args:
        url: Page URL
        html: Raw HTML

    Returns:
        FetchedPage: Extracted title and text (text may be empty)
    """
    soup = BeautifulSoup(html, "html.parser")
    for element in soup(NON_CONTENT_TAGS):
        element.decompose()

    title = soup.title.get_text(strip=True) if soup.title else ""
    root = soup.body or soup
    text = root.get_text(separator="\n")
    return FetchedPage(url=url, title=title, text=text)


class HttpPageFetcher:
    """Fetch pages over plain HTTP with a shared AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Args:
            client: Shared async HTTP client (owned by the caller)
        """
        self._client = client

    async def fetch_page(self, url: str) -> FetchedPage:
        """
        Fetch a page and extract its text.

        Raises:
            FetchError: Network failure or non-success status
        """
        try:
            response = await self._client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Page fetch returned {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"Page fetch failed: {e}", url=url) from e

        return extract_page(url, response.text)

    async def fetch_text(self, url: str) -> AuxiliaryResult:
        """Fetch a URL's body as text; failures become ``Absent``."""
        try:
            response = await self._client.get(url, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.info(f"{__name__}:fetch_text - {url} unavailable: {type(e).__name__}")
            return Absent(reason=type(e).__name__)

        if not response.is_success:
            return Absent(reason=f"HTTP {response.status_code}")
        return Present(value=response.text)
