"""Scraper for pastpapers.wiki.

Knows the site's URL scheme (`/page/<n>/?s=<term>` for search,
`/page/<n>/` for the latest posts) and which selector profile each
listing uses.
"""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from pastpapers.core.models import PaperDetail, PaperStub
from pastpapers.extractors.detail import DetailExtractor
from pastpapers.extractors.listing import ListingExtractor

from .base_scraper import BaseScraper

# characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _page_number(page) -> int:
    if isinstance(page, str) and page.strip().isdigit():
        page = int(page)
    if isinstance(page, bool) or not isinstance(page, int):
        raise ValueError(f"page must be a whole number, got {page!r}")
    n = page
    if n < 1:
        raise ValueError(f"page must be >= 1, got {page!r}")
    return n


class PastPapersScraper(BaseScraper):
    """Search, browse and inspect papers; download their files."""

    def search_url(self, term: str, page=1) -> str:
        return f"/page/{_page_number(page)}/?s={quote(term, safe=_URI_COMPONENT_SAFE)}"

    def recent_url(self, page=1) -> str:
        return f"/page/{_page_number(page)}/"

    def search(self, term: str, page=1) -> List[PaperStub]:
        extractor = ListingExtractor(self.config.selectors)
        return self.scrape_list(self.search_url(term, page), extractor)

    def recent_papers(self, page=1) -> List[PaperStub]:
        extractor = ListingExtractor(self.config.recent_selectors)
        return self.scrape_list(self.recent_url(page), extractor)

    def get_details(self, url: str) -> Optional[PaperDetail]:
        extractor = DetailExtractor(
            self.base_url, self.config.selectors, self.config.external_hosts
        )
        return self.scrape_one(url, extractor)
