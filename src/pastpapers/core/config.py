from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://pastpapers.wiki"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class SiteSelectors(BaseModel):
    """
    CSS selectors for one site layout.

    Chains (tuples) are tried in order and the first element with
    non-empty text wins. Container and link-pass selectors are queried
    together as alternatives.
    """

    model_config = ConfigDict(frozen=True)

    # listing pages
    containers: Tuple[str, ...] = (".post-item", ".search-result-item", "article")
    title: Tuple[str, ...] = ("h2 a", ".post-title a", "h3 a")
    image: str = "img"

    # detail pages
    detail_title: Tuple[str, ...] = ("h1", ".post-title")
    description: str = ".post-content p"
    narrow_links: Tuple[str, ...] = (
        'a[href*=".pdf"]',
        'a[href*=".zip"]',
        'a[href*="download"]',
        ".download-btn",
        ".btn-download",
    )
    content_links: str = ".post-content a"
    images: str = "img"
    image_excludes: Tuple[str, ...] = ("logo", "avatar")


SEARCH_SELECTORS = SiteSelectors()

# The home/archive listing uses a slightly different heading markup.
RECENT_SELECTORS = SiteSelectors(
    containers=(".post-item", "article", ".search-result-item"),
    title=("h2 a", ".entry-title a"),
)


class ScraperConfig(BaseModel):
    """
    Everything a scraper instance needs: origin, transport and storage.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=15, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    downloads_dir: str = "downloads"
    fallback_filename: str = Field(default="download", min_length=1)
    external_hosts: Tuple[str, ...] = ("drive.google.com", "mega.nz")
    selectors: SiteSelectors = SEARCH_SELECTORS
    recent_selectors: SiteSelectors = RECENT_SELECTORS

    @field_validator("base_url")
    def base_url_must_be_http(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @property
    def downloads_path(self) -> Path:
        """Absolute downloads directory, relative paths anchored at the cwd."""
        path = Path(self.downloads_dir)
        if not path.is_absolute():
            path = Path.cwd() / path
        return path
