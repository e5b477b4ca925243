# page_scout/crawler/link_extractor.py
"""
Link extraction and scheme filtering for the PageScout crawler.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

SECURE_SCHEME = "https"


def is_admissible(url: Optional[str]) -> bool:
    """
    Return True if *url* may become a crawl edge.

    Only absolute ``https://`` links with something after the scheme and no
    whitespace anywhere qualify; insecure, relative and scheme-relative links
    never do.
    """
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if parts.scheme != SECURE_SCHEME:
        return False
    rest = url[len(SECURE_SCHEME) + 1:]
    return rest.startswith("//") and len(rest) > 2


def extract_links(document: BeautifulSoup) -> List[str]:
    """
    Collect admissible ``<a href>`` targets in document order.

    Values are returned as written in the markup; repeated links are kept.
    """
    links: List[str] = []
    for tag in document.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if isinstance(href_val, str) and is_admissible(href_val):
            links.append(href_val)
    return links


__all__ = ["SECURE_SCHEME", "is_admissible", "extract_links"]
