# page_scout/crawler/__init__.py
"""Обход графа ссылок: загрузка, извлечение ссылок, очередь BFS."""
from page_scout.crawler.crawler import FrontierCrawler
from page_scout.crawler.fetcher import Fetcher
from page_scout.crawler.link_extractor import extract_links, is_admissible
from page_scout.crawler.models import CrawlResult, FrontierEntry, PageData

__all__ = [
    "FrontierCrawler",
    "Fetcher",
    "extract_links",
    "is_admissible",
    "CrawlResult",
    "FrontierEntry",
    "PageData",
]
