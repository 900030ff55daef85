# File: tests/test_link_extractor.py
import pytest
from bs4 import ParserRejectedMarkup

import sitemapper.crawler.link_extractor as link_extractor
from sitemapper.crawler.errors import HTMLParseError
from sitemapper.crawler.link_extractor import find_links
from sitemapper.crawler.models import LinkKind, Reference

ROOT = "http://example.com"


def urls(refs):
    return [(r.kind, r.url) for r in refs]


def test_empty_document_yields_nothing():
    assert find_links("", ROOT) == []
    assert find_links(b"", ROOT) == []


def test_reference_page(example_html):
    assert urls(find_links(example_html, ROOT)) == [
        (LinkKind.ASSET, "http://example.com/base.css"),
        (LinkKind.ASSET, "http://example.com/buttons.css"),
        (LinkKind.PAGE, "https://golang.org"),
        (LinkKind.ASSET, "https://golang.org/doc/gopher/frontpage.png"),
        (LinkKind.ASSET, "http://example.com/scripts.js"),
    ]


def test_bytes_input(example_html):
    assert find_links(example_html.encode("utf-8"), ROOT) == find_links(example_html, ROOT)


@pytest.mark.parametrize("href", ["#section", "#", ""])
def test_fragment_and_empty_anchors_are_skipped(href):
    assert find_links(f'<a href="{href}">x</a>', ROOT) == []


def test_anchor_without_href_is_skipped():
    assert find_links('<a name="top">x</a><img alt="no src">', ROOT) == []


def test_fragment_on_other_page_is_kept():
    refs = find_links('<a href="/page#part">x</a><a href="/page">y</a>', ROOT)
    assert [r.url for r in refs] == ["http://example.com/page#part", "http://example.com/page"]


def test_relative_urls_resolve_against_page_url():
    base = "http://example.com/docs/guide/"
    refs = find_links('<a href="intro.html">i</a><script src="/js/app.js"></script>', base)
    assert urls(refs) == [
        (LinkKind.PAGE, "http://example.com/docs/guide/intro.html"),
        (LinkKind.ASSET, "http://example.com/js/app.js"),
    ]


def test_surrounding_whitespace_is_trimmed():
    refs = find_links('<a href="  /spaced  ">x</a>', ROOT)
    assert refs == [Reference("http://example.com/spaced", LinkKind.PAGE)]


@pytest.mark.parametrize("bad", ["http://[::1", "/bad%zzescape", "http://example.com:port/"])
def test_unparseable_values_are_skipped(bad):
    refs = find_links(f'<a href="{bad}">bad</a><a href="/ok">ok</a>', ROOT)
    assert refs == [Reference("http://example.com/ok", LinkKind.PAGE)]


def test_other_tags_are_ignored():
    html = '<iframe src="/frame"></iframe><form action="/post"></form><video src="/v.mp4"></video>'
    assert find_links(html, ROOT) == []


def test_malformed_markup_is_tolerated():
    html = '<html><body><div><a href="/a">unclosed <p><img src="x.png"></div></span><link href="s.css">'
    assert urls(find_links(html, ROOT)) == [
        (LinkKind.PAGE, "http://example.com/a"),
        (LinkKind.ASSET, "http://example.com/x.png"),
        (LinkKind.ASSET, "http://example.com/s.css"),
    ]


def test_rejected_markup_raises_html_parse_error(monkeypatch):
    def reject(*args, **kwargs):
        raise ParserRejectedMarkup("garbage")

    monkeypatch.setattr(link_extractor, "BeautifulSoup", reject)
    with pytest.raises(HTMLParseError) as exc_info:
        find_links(b"\x00\x01", ROOT)
    assert exc_info.value.url == ROOT


@pytest.mark.parametrize(
    "href,expected",
    [
        ("/search?q=100%", "http://example.com/search?q=100%"),
        ("/search?q=%zz&x=1", "http://example.com/search?q=%zz&x=1"),
    ],
)
def test_query_escapes_are_not_validated(href, expected):
    assert find_links(f'<a href="{href}">x</a>', ROOT) == [Reference(expected, LinkKind.PAGE)]


def test_differently_escaped_links_share_one_identity():
    refs = find_links('<a href="/a b">x</a><a href="/a%20b">y</a>', ROOT)
    assert {r.url for r in refs} == {"http://example.com/a%20b"}


def test_whitespace_only_href_points_at_page_without_fragment():
    refs = find_links('<a href="   ">self</a>', "http://example.com/doc#intro")
    assert refs == [Reference("http://example.com/doc", LinkKind.PAGE)]
