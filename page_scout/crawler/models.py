# page_scout/crawler/models.py
"""
Data models for the PageScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass(slots=True)
class PageData:
    """Raw response of a fetched page: address, body bytes and response metadata."""

    url: str
    content: bytes
    status: Optional[int] = None
    content_type: str = ""


@dataclass(frozen=True, slots=True)
class FrontierEntry:
    """Discovered address waiting in the frontier, with its BFS depth."""

    url: str
    depth: int


@dataclass(slots=True)
class CrawlResult:
    """
    Addresses in the order they were dequeued and accepted.

    Behaves like a read-only sequence of :attr:`pages`. Node-local failures
    are kept in :attr:`failures` (address -> reason).
    """

    seed: str
    max_depth: int
    pages: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    def __iter__(self) -> Iterator[str]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(self, index):
        return self.pages[index]

    def __contains__(self, url: object) -> bool:
        return url in self.pages
