# File: page_scout/engine.py
"""page_scout.engine: синхронные точки входа для обхода и анализа страниц."""

from __future__ import annotations

import asyncio
from typing import Optional

from page_scout.analyzer import PageSignals, fetch_signals
from page_scout.config import ScoutConfig
from page_scout.crawler.crawler import FrontierCrawler
from page_scout.crawler.fetcher import PageFetcher
from page_scout.crawler.models import CrawlResult
from page_scout.errors import ScoutError
from page_scout.logger import logger

__all__ = ["Engine", "build_crawl_graph", "extract_signals"]


async def crawl_graph(
    seed: str,
    max_depth: int,
    config: Optional[ScoutConfig] = None,
    fetcher: Optional[PageFetcher] = None,
) -> CrawlResult:
    """Корутина обхода: открывает краулер в контексте и возвращает CrawlResult."""
    async with FrontierCrawler(config, fetcher=fetcher) as crawler:
        return await crawler.crawl(seed, max_depth)


def build_crawl_graph(
    seed: str,
    max_depth: int,
    config: Optional[ScoutConfig] = None,
    fetcher: Optional[PageFetcher] = None,
) -> CrawlResult:
    """Обходит граф ссылок от *seed* в ширину до глубины *max_depth*.

    Ошибки загрузки отдельных страниц не пробрасываются: они попадают в
    ``CrawlResult.failures``, а обход продолжается.
    """
    return asyncio.run(crawl_graph(seed, max_depth, config, fetcher))


def extract_signals(
    address: str,
    config: Optional[ScoutConfig] = None,
    fetcher: Optional[PageFetcher] = None,
) -> PageSignals:
    """Загружает *address* и возвращает заголовок, h1/h2 и ключевые слова.

    Raises FetchError / ParseError; частичный результат не возвращается.
    """
    return asyncio.run(fetch_signals(address, config, fetcher))


class Engine:
    """Фасад для CLI и тестов: конфиг + обход + анализ."""

    def __init__(self, config: Optional[ScoutConfig] = None, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config or ScoutConfig()
        self.fetcher = fetcher

    def _address(self, value: Optional[str]) -> str:
        address = value or self.config.seed
        if not address:
            raise ValueError("No seed address given and none set in config")
        return address

    def build_crawl_graph(self, seed: Optional[str] = None, max_depth: Optional[int] = None) -> CrawlResult:
        depth = self.config.max_depth if max_depth is None else max_depth
        return build_crawl_graph(self._address(seed), depth, self.config, self.fetcher)

    def extract_signals(self, address: Optional[str] = None) -> PageSignals:
        target = self._address(address)
        try:
            return extract_signals(target, self.config, self.fetcher)
        except ScoutError as exc:
            logger.error("Error in extracting keywords from %s: %s", target, exc.reason)
            raise
