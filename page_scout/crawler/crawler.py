# === FILE: page_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from typing import Deque, List, Optional, Set

from aiohttp import ClientSession

from page_scout.config import ScoutConfig
from page_scout.crawler.fetcher import Fetcher, PageFetcher, open_session
from page_scout.crawler.link_extractor import extract_links
from page_scout.crawler.models import CrawlResult, FrontierEntry
from page_scout.errors import FetchError, ParseError
from page_scout.logger import LOGGER_NAME
from page_scout.parser.html_parser import parse_html

__all__ = ("FrontierCrawler",)


class FrontierCrawler:
    """
    Обход графа ссылок в ширину с ограничением глубины.

    По умолчанию строго последовательный: одна загрузка за раз, порядок
    результата - порядок уровней BFS. При ``concurrency > 1`` адреса
    разбирают несколько воркеров из общей очереди; каждый адрес всё так же
    посещается не более одного раза, но порядок результата становится
    порядком извлечения из очереди и может смешивать уровни.
    """

    def __init__(self, config: Optional[ScoutConfig] = None, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config or ScoutConfig()
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> FrontierCrawler:
        if self.fetcher is None:
            self.session = open_session(self.config)
            self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, seed: str, max_depth: Optional[int] = None) -> CrawlResult:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized; use 'async with FrontierCrawler(...)'")
        depth_limit = self.config.max_depth if max_depth is None else max_depth
        if depth_limit < 0:
            raise ValueError("max_depth must be >= 0")

        self.logger.info("Старт обхода: %s (глубина %d)", seed, depth_limit)
        start = time.monotonic()
        result = CrawlResult(seed=seed, max_depth=depth_limit)
        if self.config.concurrency > 1:
            await self._crawl_pool(result)
        else:
            await self._crawl_sequential(result)
        duration = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц за %.2f с, ошибок: %d",
            len(result.pages), duration, len(result.failures),
        )
        return result

    async def _crawl_sequential(self, result: CrawlResult) -> None:
        frontier: Deque[FrontierEntry] = deque([FrontierEntry(result.seed, 0)])
        visited: Set[str] = set()
        while frontier:
            entry = frontier.popleft()
            if not self._visit(entry, visited, result):
                continue
            for link in await self._discover(entry, result):
                if link not in visited:
                    frontier.append(FrontierEntry(link, entry.depth + 1))

    async def _crawl_pool(self, result: CrawlResult) -> None:
        queue: asyncio.Queue[FrontierEntry] = asyncio.Queue()
        visited: Set[str] = set()
        queue.put_nowait(FrontierEntry(result.seed, 0))
        workers = [
            asyncio.create_task(self._worker(queue, visited, result))
            for _ in range(self.config.concurrency)
        ]
        joined = asyncio.create_task(queue.join())
        # a worker only ends early by raising; stop waiting on the queue then
        await asyncio.wait([joined, *workers], return_when=asyncio.FIRST_COMPLETED)
        joined.cancel()
        for w in workers:
            w.cancel()
        await asyncio.gather(joined, return_exceptions=True)
        outcomes = await asyncio.gather(*workers, return_exceptions=True)
        for outcome in outcomes:
            if isinstance(outcome, Exception):
                raise outcome

    async def _worker(self, queue: asyncio.Queue[FrontierEntry], visited: Set[str], result: CrawlResult) -> None:
        while True:
            entry = await queue.get()
            try:
                if not self._visit(entry, visited, result):
                    continue
                for link in await self._discover(entry, result):
                    if link not in visited:
                        queue.put_nowait(FrontierEntry(link, entry.depth + 1))
            finally:
                queue.task_done()

    def _visit(self, entry: FrontierEntry, visited: Set[str], result: CrawlResult) -> bool:
        """Mark *entry* visited if it is new; True when its links should be explored.

        Check and mark run without an await in between, so two workers never
        both accept one address.
        """
        if entry.url in visited:
            return False
        visited.add(entry.url)
        result.pages.append(entry.url)
        return entry.depth < result.max_depth

    async def _discover(self, entry: FrontierEntry, result: CrawlResult) -> List[str]:
        try:
            page = await self.fetcher.fetch(entry.url)
            document = parse_html(page.content, entry.url)
        except (FetchError, ParseError) as exc:
            self.logger.warning("Error getting links from %s: %s", entry.url, exc.reason)
            result.failures[entry.url] = exc.reason
            return []
        links = extract_links(document)
        self.logger.debug("depth %d: %s -> %d links", entry.depth, entry.url, len(links))
        return links
