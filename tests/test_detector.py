import pytest

from pastpapers.core.models import LinkType
from pastpapers.core.scraping.detector import (
    HarvestPass,
    classify_link,
    detect_link_type,
    extension_for_content_type,
)


def test_pdf_link_label_depends_on_pass():
    assert classify_link("x.pdf", "", HarvestPass.NARROW) == (LinkType.PDF, "Download")
    assert classify_link("x.pdf", "", HarvestPass.BROAD) == (LinkType.PDF, "Direct Link")


def test_visible_text_wins_over_fallback_label():
    assert classify_link("/a.zip", "  Paper 1  ", HarvestPass.BROAD) == (
        LinkType.ZIP,
        "Paper 1",
    )


@pytest.mark.parametrize(
    "href, text, expected",
    [
        ("/a.pdf", "", LinkType.PDF),
        ("/a.zip", "", LinkType.ZIP),
        # .pdf is checked before .zip
        ("/a.zip?mirror=b.pdf", "", LinkType.PDF),
        ("/go/123/", "DOWNLOAD now", LinkType.LINK),
        ("https://drive.google.com/file/d/1", "", LinkType.EXTERNAL),
        ("https://mega.nz/file/abc", "mirror", LinkType.EXTERNAL),
        # text rule comes before the hosting rule
        ("https://mega.nz/file/abc", "Download", LinkType.LINK),
        ("/about-us/", "About", None),
    ],
)
def test_detect_link_type_rule_order(href, text, expected):
    assert detect_link_type(href, text) is expected


def test_custom_external_hosts():
    assert detect_link_type("https://files.example.org/x", "", ["files.example.org"]) is (
        LinkType.EXTERNAL
    )
    assert detect_link_type("https://drive.google.com/x", "", ["files.example.org"]) is None


def test_missing_href_is_not_a_candidate():
    assert classify_link("", "Download", HarvestPass.NARROW) is None


@pytest.mark.parametrize(
    "content_type, ext",
    [
        ("application/pdf", ".pdf"),
        ("application/zip", ".zip"),
        ("application/x-zip-compressed", ".zip"),
        ("text/html; charset=utf-8", ""),
        (None, ""),
    ],
)
def test_extension_for_content_type(content_type, ext):
    assert extension_for_content_type(content_type) == ext
