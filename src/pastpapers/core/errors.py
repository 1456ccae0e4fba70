"""Exception hierarchy for the scraping core.

Only `DownloadError` is meant to reach callers of the public API; the
other errors are raised internally and recovered by the scraper layer.
"""

from __future__ import annotations


class PastPapersError(Exception):
    """Base class for every error raised by this package."""


class TransientFetchError(PastPapersError):
    """A listing or detail page could not be retrieved (network, timeout, non-2xx)."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class InvalidUrlError(PastPapersError, ValueError):
    """An href could not be resolved to an absolute http(s) URL."""

    def __init__(self, candidate: str, reason: str = "malformed URL"):
        super().__init__(f"{candidate!r}: {reason}")
        self.candidate = candidate


class DownloadError(PastPapersError):
    """Streaming an asset to disk failed."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Download of {url} failed: {reason}")
        self.url = url
        self.reason = reason
