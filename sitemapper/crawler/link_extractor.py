# sitemapper/crawler/link_extractor.py
"""
Reference extraction for Sitemapper: finds page links and asset references
in an HTML document and resolves them against the page's own URL.
"""
from __future__ import annotations

from typing import Dict, List, Tuple, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from sitemapper.crawler.errors import HTMLParseError, ParseError
from sitemapper.crawler.models import LinkKind, Reference
from sitemapper.utils import resolve_url

# tag name -> (attribute holding the URL, kind of reference)
_SOURCES: Dict[str, Tuple[str, LinkKind]] = {
    "a": ("href", LinkKind.PAGE),
    "img": ("src", LinkKind.ASSET),
    "script": ("src", LinkKind.ASSET),
    "link": ("href", LinkKind.ASSET),
}


def find_links(content: Union[bytes, str], base_url: str) -> List[Reference]:
    """
    Extract page and asset references from an HTML document, in document order.

    Anchors pointing at a fragment of the same page (``href="#..."``) and
    empty attributes are skipped, as is any value that is not a valid URL.
    Relative values are resolved against *base_url*.
    """
    try:
        soup = BeautifulSoup(content, "html.parser")
    except ParserRejectedMarkup as exc:
        raise HTMLParseError(base_url, exc) from exc

    references: List[Reference] = []
    for tag in soup.find_all(list(_SOURCES)):
        if not isinstance(tag, Tag):
            continue
        attr, kind = _SOURCES[tag.name]
        value = tag.get(attr)
        if not isinstance(value, str) or not value:
            continue
        if kind is LinkKind.PAGE and value.startswith("#"):
            continue
        try:
            url = resolve_url(value.strip(), base_url)
        except ParseError:
            continue
        references.append(Reference(url, kind))
    return references
