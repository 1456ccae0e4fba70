"""Prefect tasks wrapping the scraper operations.

Each task builds its own scraper, logs through the run logger and
returns plain records. Retries are off: listing and detail fetches
already degrade to empty results, and a download failure should surface.
"""

from __future__ import annotations

from typing import List, Optional

from prefect import get_run_logger, task

from pastpapers.core.config import ScraperConfig
from pastpapers.core.models import FetchResult, PaperDetail, PaperStub
from pastpapers.scrapers import PastPapersScraper, get_scraper_for_url


@task(name="search_papers", retries=0)
def search_papers_task(
    term: str, page: int = 1, config: Optional[ScraperConfig] = None
) -> List[PaperStub]:
    logger = get_run_logger()
    with PastPapersScraper(config) as scraper:
        papers = scraper.search(term, page)
    logger.info("Found %d papers for %r (page %s)", len(papers), term, page)
    return papers


@task(name="paper_details", retries=0)
def paper_details_task(
    url: str, config: Optional[ScraperConfig] = None
) -> Optional[PaperDetail]:
    logger = get_run_logger()
    with get_scraper_for_url(url)(config) as scraper:
        details = scraper.get_details(url)
    if details is None:
        logger.warning("No details for %s", url)
    else:
        logger.info("%s: %d download links", url, len(details.download_links))
    return details


@task(name="download_asset", retries=0)
def download_asset_task(
    url: str, suggested_name: Optional[str] = None, config: Optional[ScraperConfig] = None
) -> FetchResult:
    logger = get_run_logger()
    with get_scraper_for_url(url)(config) as scraper:
        result = scraper.download(url, suggested_name)
    logger.info("Saved file %s (size=%s bytes)", result.file_path, result.size)
    return result
