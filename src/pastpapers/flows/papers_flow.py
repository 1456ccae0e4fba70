"""
Papers flow

Search the archive, read the detail page of the first few results and
download the first file each one links to. Returns a manifest with one
row per paper; a failed download is recorded in the `error` column and
the flow moves on to the next paper.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
from prefect import flow, get_run_logger

from pastpapers.core.config import ScraperConfig
from pastpapers.core.errors import DownloadError
from pastpapers.core.scraping.prefect_tasks import (
    download_asset_task,
    paper_details_task,
    search_papers_task,
)
from pastpapers.services.storage import save_dataframe

MANIFEST_COLUMNS = [
    "title",
    "url",
    "link_count",
    "first_link",
    "file_path",
    "error",
]


@flow(name="Past Papers Downloader", log_prints=True)
def papers_flow(
    term: str,
    page: int = 1,
    max_papers: int = 3,
    download: bool = True,
    manifest_dir: Optional[str] = None,
    config_dict: Optional[dict] = None,
) -> pd.DataFrame:
    """Search → details → download, for the first `max_papers` results.

    config_dict: optional overrides validated as `ScraperConfig`.
    """
    logger = get_run_logger()
    config = ScraperConfig(**(config_dict or {}))

    papers = search_papers_task(term, page, config)
    logger.info("Processing %d of %d papers", min(max_papers, len(papers)), len(papers))

    rows = []
    for paper in papers[:max_papers]:
        row = dict.fromkeys(MANIFEST_COLUMNS)
        row.update(title=paper.title, url=paper.url, link_count=0)

        details = paper_details_task(paper.url, config)
        if details is not None and details.download_links:
            first = details.download_links[0]
            row.update(link_count=len(details.download_links), first_link=first.url)
            if download:
                try:
                    result = download_asset_task(first.url, None, config)
                    row["file_path"] = result.file_path
                except DownloadError as exc:
                    logger.error("Download failed: %s", exc)
                    row["error"] = str(exc)
        rows.append(row)

    manifest = pd.DataFrame(rows, columns=MANIFEST_COLUMNS)
    if manifest_dir:
        save_dataframe(manifest, manifest_dir)
    return manifest


if __name__ == "__main__":
    print(papers_flow("mathematics 2023"))
