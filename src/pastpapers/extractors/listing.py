from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup

from pastpapers.core.config import SiteSelectors
from pastpapers.core.interfaces import BaseExtractor
from pastpapers.core.models import PaperStub
from pastpapers.core.scraping.parser import FieldRule, element_attr, first_attr

logger = logging.getLogger(__name__)


class ListingExtractor(BaseExtractor):
    """
    Turns a listing/search page into PaperStubs.
    Every container matching any of the container selectors is handled on
    its own; a container without title or link is skipped.
    """

    def __init__(self, selectors: SiteSelectors):
        super().__init__(selectors)
        self.title_rule = FieldRule(selectors.title, attribute="href")

    def extract(self, soup: BeautifulSoup) -> List[PaperStub]:
        papers: List[PaperStub] = []
        # a grouped selector returns matches in document order
        for item in soup.select(", ".join(self.selectors.containers)):
            el, title = self.title_rule.match(item)
            link = element_attr(el, self.title_rule.attribute)
            if not title or not link:
                continue
            image = first_attr(item, self.selectors.image, "src")
            papers.append(PaperStub(title=title, url=link.strip(), image=image))

        logger.info("%d papers found on listing page", len(papers))
        return papers
