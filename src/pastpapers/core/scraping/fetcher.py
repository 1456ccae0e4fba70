"""HTTP fetcher with a fixed timeout and a browser-like User-Agent.

Provides a small `Fetcher` object exposing `get`, `stream_get` and
`get_soup`. No retry adapter is mounted: a failed page fetch
is reported once and the caller decides what to do.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup, ParserRejectedMarkup

from pastpapers.core.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from pastpapers.core.errors import TransientFetchError
from pastpapers.core.scraping.parser import parse_html

logger = logging.getLogger(__name__)


class Fetcher:
    """Small HTTP client bound to one origin.

    Usage:
        f = Fetcher("https://pastpapers.wiki", timeout=15)
        soup = f.get_soup("/page/1/")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self.session = session or requests.Session()

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        base = {"User-Agent": self.user_agent}
        if headers:
            base.update(headers)
        return base

    def absolute(self, url: str) -> str:
        return urljoin(self.base_url + "/", url)

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        return self.session.get(
            self.absolute(url),
            headers=self._headers(headers),
            timeout=self.timeout,
            **kwargs,
        )

    def stream_get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        # Streamed GET for downloading large files
        return self.session.get(
            self.absolute(url),
            headers=self._headers(headers),
            timeout=self.timeout,
            stream=True,
            **kwargs,
        )

    def get_soup(self, url: str) -> BeautifulSoup:
        """Fetch a page and parse it; raise TransientFetchError on HTTP or parse failure."""
        logger.info("Fetching %s", self.absolute(url))
        try:
            resp = self.get(url)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise TransientFetchError(self.absolute(url), str(exc)) from exc
        try:
            return parse_html(resp.text)
        except ParserRejectedMarkup as exc:
            raise TransientFetchError(self.absolute(url), f"unparseable page: {exc}") from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
