"""Detail page extraction.

Download links are harvested in two sweeps over the page:

1. narrow pass: anchors whose href looks like a file or a download,
   plus elements styled as download buttons;
2. broad pass: every anchor inside the post body.

Both passes feed one `LinkCollector`, keyed by resolved URL, so a link
seen in the narrow pass keeps its narrow-pass label.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from pastpapers.core.config import SiteSelectors
from pastpapers.core.errors import InvalidUrlError
from pastpapers.core.interfaces import BaseExtractor
from pastpapers.core.models import DownloadLink, PaperDetail
from pastpapers.core.scraping.detector import (
    DEFAULT_EXTERNAL_HOSTS,
    HarvestPass,
    classify_link,
)
from pastpapers.core.scraping.normalizer import resolve_url
from pastpapers.core.scraping.parser import element_attr, element_text, first_text

logger = logging.getLogger(__name__)


class LinkCollector:
    """Ordered set of DownloadLinks keyed by resolved URL."""

    def __init__(
        self,
        base_origin: str,
        external_hosts: Iterable[str] = DEFAULT_EXTERNAL_HOSTS,
    ):
        self.base_origin = base_origin
        self.external_hosts = tuple(external_hosts)
        self._links: Dict[str, DownloadLink] = {}

    def offer(self, href: Optional[str], text: str, pass_: HarvestPass) -> bool:
        """Add the anchor if it is a new download candidate. Returns True if added."""
        if not href:
            return False
        verdict = classify_link(href, text, pass_, self.external_hosts)
        if verdict is None:
            return False
        try:
            url = resolve_url(href, self.base_origin)
        except InvalidUrlError as exc:
            logger.debug("Skipping link: %s", exc)
            return False
        if url in self._links:
            return False
        link_type, label = verdict
        self._links[url] = DownloadLink(text=label, url=url, type=link_type)
        return True

    def harvest(self, elements: Iterable[Tag], pass_: HarvestPass) -> None:
        for el in elements:
            self.offer(element_attr(el, "href"), element_text(el), pass_)

    @property
    def links(self) -> List[DownloadLink]:
        return list(self._links.values())

    def __len__(self) -> int:
        return len(self._links)


class DetailExtractor(BaseExtractor):
    """Maps a paper's detail page to a PaperDetail."""

    def __init__(
        self,
        base_origin: str,
        selectors: SiteSelectors,
        external_hosts: Iterable[str] = DEFAULT_EXTERNAL_HOSTS,
    ):
        super().__init__(selectors)
        self.base_origin = base_origin
        self.external_hosts = tuple(external_hosts)

    def extract(self, soup: BeautifulSoup) -> PaperDetail:
        s = self.selectors
        description_el = soup.select_one(s.description)

        collector = LinkCollector(self.base_origin, self.external_hosts)
        collector.harvest(soup.select(", ".join(s.narrow_links)), HarvestPass.NARROW)
        collector.harvest(soup.select(s.content_links), HarvestPass.BROAD)

        return PaperDetail(
            title=first_text(soup, s.detail_title),
            description=element_text(description_el),
            download_links=collector.links,
            images=self.extract_images(soup),
        )

    def extract_images(self, soup: BeautifulSoup) -> List[str]:
        """Absolute image URLs in document order, minus logos/avatars."""
        images: List[str] = []
        for img in soup.select(self.selectors.images):
            src = element_attr(img, "src")
            if not src or any(x in src for x in self.selectors.image_excludes):
                continue
            try:
                images.append(resolve_url(src, self.base_origin))
            except InvalidUrlError as exc:
                logger.debug("Skipping image: %s", exc)
        return images
