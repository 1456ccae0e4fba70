"""Base scraper: fetch a page, hand it to an extractor, never raise.

Site scrapers build URLs and pick extractors; this class owns the
failure policy shared by listing and detail pages.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, TypeVar

from pastpapers.core.config import ScraperConfig
from pastpapers.core.errors import TransientFetchError
from pastpapers.core.interfaces import BaseExtractor
from pastpapers.core.models import FetchResult
from pastpapers.core.scraping.downloader import Downloader
from pastpapers.core.scraping.fetcher import Fetcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseScraper:
    """Per-request scraper; each instance owns its own HTTP session."""

    def __init__(self, config: ScraperConfig | None = None, fetcher: Fetcher | None = None):
        self.config = config or ScraperConfig()
        self.fetcher = fetcher or Fetcher(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def scrape(
        self, url: str, extractor: BaseExtractor, default: Callable[[], T]
    ) -> T:
        """Fetch `url` and run `extractor` on it.

        A fetch, parse or extraction failure is logged and `default()` is
        returned instead.
        """
        try:
            soup = self.fetcher.get_soup(url)
        except TransientFetchError as exc:
            logger.warning("Fetch failed, returning empty result: %s", exc)
            return default()
        try:
            return extractor.extract(soup)
        except Exception as exc:
            logger.exception("Extraction failed for %s, returning empty result: %s", url, exc)
            return default()

    def scrape_list(self, url: str, extractor: BaseExtractor) -> List:
        return self.scrape(url, extractor, list)

    def scrape_one(self, url: str, extractor: BaseExtractor) -> Optional[object]:
        return self.scrape(url, extractor, lambda: None)

    def download(self, url: str, suggested_name: Optional[str] = None) -> FetchResult:
        """Stream an asset to the downloads directory. Raises DownloadError."""
        downloader = Downloader(
            fetcher=self.fetcher,
            dest_dir=self.config.downloads_path,
            fallback_filename=self.config.fallback_filename,
        )
        return downloader.download(url, suggested_name)

    def close(self) -> None:
        self.fetcher.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
