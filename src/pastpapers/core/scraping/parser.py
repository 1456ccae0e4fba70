"""HTML parsing helpers: selector-fallback chains.

A field is described by a `FieldRule`: an ordered list of CSS selectors
and, optionally, the attribute to read from the matched element. The
first selector whose element carries non-empty text wins; no match
yields an empty value instead of an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def element_text(el: Optional[Tag]) -> str:
    if el is None:
        return ""
    return (el.get_text() or "").strip()


def element_attr(el: Optional[Tag], attribute: str) -> Optional[str]:
    """Attribute value as a string, or None when missing/blank."""
    if el is None:
        return None
    value = el.get(attribute)
    if isinstance(value, list):
        value = " ".join(value)
    if value is None or not str(value).strip():
        return None
    return str(value)


@dataclass(frozen=True)
class FieldRule:
    """Ordered selector chain for one field."""

    selectors: Tuple[str, ...]
    attribute: Optional[str] = None

    def match(self, root: Tag) -> Tuple[Optional[Tag], str]:
        """Return the first element with non-empty text and that text."""
        return first_match(root, self.selectors)


def first_match(root: Tag, selectors: Sequence[str]) -> Tuple[Optional[Tag], str]:
    for selector in selectors:
        for el in root.select(selector):
            text = element_text(el)
            if text:
                return el, text
    return None, ""


def first_text(root: Tag, selectors: Sequence[str]) -> str:
    return first_match(root, selectors)[1]


def first_attr(root: Tag, selector: str, attribute: str) -> Optional[str]:
    return element_attr(root.select_one(selector), attribute)
