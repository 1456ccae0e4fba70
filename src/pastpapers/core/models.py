"""Record types produced by the extractors and the downloader.

All models are frozen pydantic models. Field names are snake_case in
Python and camelCase when dumped with ``by_alias=True`` so a JSON layer
can return them as-is.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LinkType(str, Enum):
    PDF = "pdf"
    ZIP = "zip"
    EXTERNAL = "external"
    LINK = "link"


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class PaperStub(_Record):
    """Minimal record taken from a listing page."""

    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    image: Optional[str] = None


class DownloadLink(_Record):
    text: str
    url: str
    type: LinkType


class PaperDetail(_Record):
    """Detail page record: description, classified links and images."""

    title: str = ""
    description: str = ""
    download_links: List[DownloadLink] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)


class FetchResult(_Record):
    """Where a downloaded asset ended up, plus integrity metadata."""

    file_path: str
    url: str
    size: int = 0
    sha256: str = ""
    content_type: Optional[str] = None
