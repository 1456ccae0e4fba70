"""pastpapers: scrape paper listings and details, download their files.

Each call below builds its own scraper (and HTTP session), so calls can
run concurrently without sharing state.
"""

from __future__ import annotations

from typing import List, Optional

from pastpapers.core.config import ScraperConfig
from pastpapers.core.errors import (
    DownloadError,
    InvalidUrlError,
    PastPapersError,
    TransientFetchError,
)
from pastpapers.core.models import (
    DownloadLink,
    FetchResult,
    LinkType,
    PaperDetail,
    PaperStub,
)
from pastpapers.scrapers import PastPapersScraper, get_scraper_for_url


def search(term: str, page=1, config: ScraperConfig | None = None) -> List[PaperStub]:
    """Search results for `term`; empty list when the site cannot be read."""
    with PastPapersScraper(config) as scraper:
        return scraper.search(term, page)


def recent_papers(page=1, config: ScraperConfig | None = None) -> List[PaperStub]:
    with PastPapersScraper(config) as scraper:
        return scraper.recent_papers(page)


def get_details(url: str, config: ScraperConfig | None = None) -> Optional[PaperDetail]:
    """Detail record for a paper page, or None when it cannot be read."""
    with get_scraper_for_url(url)(config) as scraper:
        return scraper.get_details(url)


def download(
    url: str, suggested_name: Optional[str] = None, config: ScraperConfig | None = None
) -> FetchResult:
    """Download one asset. Raises DownloadError on failure."""
    with get_scraper_for_url(url)(config) as scraper:
        return scraper.download(url, suggested_name)


__all__ = [
    "search",
    "recent_papers",
    "get_details",
    "download",
    "ScraperConfig",
    "PaperStub",
    "PaperDetail",
    "DownloadLink",
    "FetchResult",
    "LinkType",
    "PastPapersError",
    "TransientFetchError",
    "InvalidUrlError",
    "DownloadError",
]
