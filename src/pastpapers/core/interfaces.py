from abc import ABC, abstractmethod
from typing import Any

from bs4 import BeautifulSoup

from pastpapers.core.config import SiteSelectors


class BaseExtractor(ABC):
    """
    Contract every page extractor follows.

    An extractor receives an already-parsed document and maps it to
    records. It never fetches and never raises for missing markup.
    """

    def __init__(self, selectors: SiteSelectors):
        self.selectors = selectors

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> Any:
        """
        Map the document to records.
        Missing fields become empty values; nothing here is fatal.
        """
        pass
