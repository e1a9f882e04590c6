"""Web boundary: page and auxiliary file fetching."""

from sitechat.boundary.web.page_fetcher import (
    Absent,
    AuxiliaryResult,
    FetchedPage,
    HttpPageFetcher,
    PageFetcher,
    Present,
)

__all__ = [
    "Absent",
    "AuxiliaryResult",
    "FetchedPage",
    "HttpPageFetcher",
    "PageFetcher",
    "Present",
]
