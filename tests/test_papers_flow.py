from pathlib import Path

import pandas as pd
import pytest
from prefect.testing.utilities import prefect_test_harness

from pastpapers.core.scraping.fetcher import Fetcher
from pastpapers.flows.papers_flow import MANIFEST_COLUMNS, papers_flow
from pastpapers.services.storage import save_dataframe

BASE = "https://pastpapers.wiki"


@pytest.fixture(autouse=True, scope="module")
def prefect_harness():
    with prefect_test_harness():
        yield


@pytest.fixture
def site(monkeypatch, session, dummy_response, fixture_html):
    real_fetcher = Fetcher
    monkeypatch.setattr(
        "pastpapers.scrapers.base_scraper.Fetcher",
        lambda **kwargs: real_fetcher(session=session, **kwargs),
    )
    session.routes[f"{BASE}/page/1/?s=maths"] = dummy_response(
        fixture_html("search_page.html")
    )
    session.routes[f"{BASE}/combined-maths-2023/"] = dummy_response(
        fixture_html("detail_page.html")
    )
    return session


def test_flow_downloads_first_link_and_returns_manifest(site, dummy_response, tmp_path):
    site.routes[f"{BASE}/wp-content/uploads/2023/combined-maths-2023.pdf"] = (
        dummy_response(
            headers={"Content-Disposition": 'attachment; filename="cm-2023.pdf"'},
            chunks=[b"%PDF-1.7"],
        )
    )
    manifest = papers_flow(
        "maths",
        manifest_dir=str(tmp_path / "out"),
        config_dict={"downloads_dir": str(tmp_path / "dl")},
    )

    assert list(manifest.columns) == MANIFEST_COLUMNS
    assert len(manifest) == 2
    first = manifest.iloc[0]
    assert first["link_count"] == 3
    assert Path(first["file_path"]).read_bytes() == b"%PDF-1.7"
    # second paper's detail page is not routed: no links, no download
    assert manifest.iloc[1]["link_count"] == 0
    assert pd.isna(manifest.iloc[1]["file_path"])

    saved = pd.read_csv(tmp_path / "out" / "papers.csv")
    assert saved["title"].tolist() == manifest["title"].tolist()


def test_flow_records_download_errors_and_continues(site, tmp_path):
    manifest = papers_flow(
        "maths", max_papers=1, config_dict={"downloads_dir": str(tmp_path / "dl")}
    )
    assert len(manifest) == 1
    assert "failed" in manifest.iloc[0]["error"]
    assert pd.isna(manifest.iloc[0]["file_path"])


def test_flow_without_download(site, tmp_path):
    manifest = papers_flow("maths", download=False)
    assert manifest["file_path"].isna().all()
    assert manifest.iloc[0]["first_link"].endswith("combined-maths-2023.pdf")


def test_save_dataframe(tmp_path):
    df = pd.DataFrame([{"title": "A", "url": "/a/"}])
    path = save_dataframe.fn(df, tmp_path, name="manifest")
    assert path == str(tmp_path / "manifest.csv")
    assert pd.read_csv(path).to_dict("records") == [{"title": "A", "url": "/a/"}]

    assert save_dataframe.fn(pd.DataFrame(), tmp_path) is None
    with pytest.raises(ValueError):
        save_dataframe.fn(df, tmp_path, format="xlsx")
