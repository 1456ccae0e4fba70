"""Link classification for detail pages.

Decides whether an anchor points at something worth downloading and
tags it with a `LinkType`. Also maps response content types to file
extensions for the downloader.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple

from pastpapers.core.models import LinkType

DEFAULT_EXTERNAL_HOSTS = ("drive.google.com", "mega.nz")


class HarvestPass(str, Enum):
    """Which sweep over a detail page produced the anchor."""

    NARROW = "narrow"
    BROAD = "broad"


# Label used when the anchor has no visible text; depends on the pass.
FALLBACK_LABELS = {
    HarvestPass.NARROW: "Download",
    HarvestPass.BROAD: "Direct Link",
}


def detect_link_type(
    href: str,
    text: str = "",
    external_hosts: Iterable[str] = DEFAULT_EXTERNAL_HOSTS,
) -> Optional[LinkType]:
    """Return the link type, or None when the anchor is not a download candidate.

    Rules, first match wins: .pdf in href, .zip in href, "download" in the
    visible text, a known file-hosting domain in href.
    """
    if ".pdf" in href:
        return LinkType.PDF
    if ".zip" in href:
        return LinkType.ZIP
    if "download" in (text or "").lower():
        return LinkType.LINK
    if any(host in href for host in external_hosts):
        return LinkType.EXTERNAL
    return None


def classify_link(
    href: str,
    text: str,
    pass_: HarvestPass = HarvestPass.NARROW,
    external_hosts: Iterable[str] = DEFAULT_EXTERNAL_HOSTS,
) -> Optional[Tuple[LinkType, str]]:
    """Return ``(type, label)`` for a download candidate, else None."""
    if not href:
        return None
    link_type = detect_link_type(href, text, external_hosts)
    if link_type is None:
        return None
    label = (text or "").strip() or FALLBACK_LABELS[pass_]
    return link_type, label


def extension_for_content_type(content_type: Optional[str]) -> str:
    """Extension to append to an extensionless filename ('' if unknown)."""
    if not content_type:
        return ""
    c = content_type.lower()
    if "pdf" in c:
        return ".pdf"
    if "zip" in c:
        return ".zip"
    return ""
