"""Registry and helper to select a scraper by domain.

Simplest form: map known domains to a scraper class. Unknown domains
fall back to `PastPapersScraper`, whose selectors target the common
WordPress layout.
"""

from typing import Type
from urllib.parse import urlparse

from .base_scraper import BaseScraper
from .pastpapers_scraper import PastPapersScraper

_REGISTRY: dict[str, Type[BaseScraper]] = {
    "pastpapers.wiki": PastPapersScraper,
}


def get_scraper_for_url(url: str) -> Type[BaseScraper]:
    domain = urlparse(url).netloc.lower()
    if domain in _REGISTRY:
        return _REGISTRY[domain]
    for key in _REGISTRY:
        if domain.endswith("." + key):
            return _REGISTRY[key]
    return PastPapersScraper


__all__ = ["get_scraper_for_url", "BaseScraper", "PastPapersScraper"]
