"""Core scraping primitives exported for reuse across extractors and scrapers.

Small building blocks: Fetcher, link detector, selector chains, URL
resolver and Downloader. Prefect task wrappers live in
`pastpapers.core.scraping.prefect_tasks` and are not imported here.
"""

from .detector import HarvestPass, classify_link, detect_link_type
from .downloader import Downloader, resolve_filename
from .fetcher import Fetcher
from .normalizer import is_absolute_url, resolve_url
from .parser import FieldRule, first_match, parse_html

__all__ = [
    "Fetcher",
    "HarvestPass",
    "classify_link",
    "detect_link_type",
    "Downloader",
    "resolve_filename",
    "is_absolute_url",
    "resolve_url",
    "FieldRule",
    "first_match",
    "parse_html",
]
