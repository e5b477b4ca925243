# File: tests/conftest.py
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from page_scout.config import ScoutConfig
from page_scout.crawler.models import PageData
from page_scout.errors import FetchError


class FakeFetcher:
    """
    In-memory fetcher: address -> HTML.

    Addresses missing from *pages* fail with FetchError. Every call is
    recorded in ``calls`` in order.
    """

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        if url not in self.pages:
            raise FetchError(url, "no such host")
        return PageData(url=url, content=self.pages[url].encode("utf-8"), status=200)


def links_page(*targets: str, title: Optional[str] = None) -> str:
    """Build a small HTML page with one anchor per target."""
    head = f"<head><title>{title}</title></head>" if title else ""
    anchors = "".join(f'<a href="{t}">{t}</a>' for t in targets)
    return f"<html>{head}<body>{anchors}</body></html>"


@pytest.fixture()
def make_page():
    return links_page


@pytest.fixture()
def stopword_file(tmp_path) -> Path:
    """Custom stopword list with mixed case and blank lines."""
    path = tmp_path / "stop.txt"
    path.write_text("Lorem\n\nipsum\n", encoding="utf-8")
    return path


@pytest.fixture()
def basic_config() -> ScoutConfig:
    """Return a basic valid ScoutConfig for crawler tests."""
    return ScoutConfig(max_depth=2, timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def site() -> Dict[str, str]:
    """
    Small link graph:

        root -> a, b, a (dup), http://insecure
        a    -> c, b, root
        b    -> d
        c    -> e
        d    -> (nothing)
    """
    return {
        "https://site.test/": links_page(
            "https://site.test/a",
            "https://site.test/b",
            "https://site.test/a",
            "http://site.test/insecure",
            "/relative",
            title="Root",
        ),
        "https://site.test/a": links_page(
            "https://site.test/c", "https://site.test/b", "https://site.test/"
        ),
        "https://site.test/b": links_page("https://site.test/d"),
        "https://site.test/c": links_page("https://site.test/e"),
        "https://site.test/d": links_page(),
        "https://site.test/e": links_page(),
    }


@pytest.fixture()
def fake_fetcher(site) -> FakeFetcher:
    return FakeFetcher(site)


@pytest.fixture()
def fetcher_cls():
    """The FakeFetcher class itself, for tests that build their own graph."""
    return FakeFetcher
