from pastpapers.core.scraping.parser import (
    FieldRule,
    element_attr,
    first_attr,
    first_match,
    first_text,
    parse_html,
)

HTML = """
<div id="root">
  <h2><a href="/empty/">   </a></h2>
  <h2><a href="/second/">Second heading</a></h2>
  <div class="post-title"><a href="/post/">Post title</a></div>
  <img class="thumb" src="">
  <img src="/a.jpg">
</div>
"""


def test_first_match_skips_elements_with_empty_text():
    soup = parse_html(HTML)
    el, text = first_match(soup, ["h2 a", ".post-title a"])
    assert text == "Second heading"
    assert el["href"] == "/second/"


def test_chain_order_beats_document_order():
    soup = parse_html(HTML)
    assert first_text(soup, [".post-title a", "h2 a"]) == "Post title"


def test_no_match_is_empty_not_an_error():
    soup = parse_html(HTML)
    assert first_match(soup, ["h1", ".missing"]) == (None, "")
    assert first_attr(soup, "video", "src") is None


def test_field_rule_keeps_attribute_name():
    rule = FieldRule(("h3 a", "h2 a"), attribute="href")
    el, text = rule.match(parse_html(HTML))
    assert text == "Second heading"
    assert element_attr(el, rule.attribute) == "/second/"


def test_blank_attributes_are_missing():
    soup = parse_html(HTML)
    assert first_attr(soup, "img.thumb", "src") is None
    assert first_attr(soup, "img[src]:not(.thumb)", "src") == "/a.jpg"
    assert element_attr(None, "href") is None
