"""URL resolution helpers.

`resolve_url` turns a possibly-relative href into an absolute http(s)
URL against a base origin.
"""

from __future__ import annotations

from urllib.parse import urljoin, urlparse

from pastpapers.core.errors import InvalidUrlError

ABSOLUTE_PREFIXES = ("http://", "https://")


def is_absolute_url(url: str) -> bool:
    return url.startswith(ABSOLUTE_PREFIXES)


def resolve_url(candidate: str, base_origin: str) -> str:
    """Return `candidate` as an absolute URL.

    Absolute http(s) URLs come back unchanged. Anything else is resolved
    with standard relative-reference rules against `base_origin`.

    Raises InvalidUrlError when the href is empty, rejected by the URL
    parser, or does not end up as an http(s) URL with a host
    (``javascript:``, ``mailto:`` and the like).
    """
    if is_absolute_url(candidate):
        return candidate

    href = (candidate or "").strip()
    if not href:
        raise InvalidUrlError(candidate, "empty href")

    try:
        full = urljoin(base_origin, href)
        parsed = urlparse(full)
    except ValueError as exc:
        raise InvalidUrlError(candidate, str(exc)) from exc

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidUrlError(candidate, "not an http(s) URL")
    return full
