# page_scout/__init__.py
"""
PageScout package initializer.
Defines package version and exposes the public entry points.
"""
__version__ = "0.1.0"

from page_scout.analyzer import ContentAnalyzer, PageSignals  # noqa: E402
from page_scout.crawler.link_extractor import is_admissible  # noqa: E402
from page_scout.crawler.models import CrawlResult  # noqa: E402
from page_scout.engine import Engine, build_crawl_graph, extract_signals  # noqa: E402
from page_scout.errors import FetchError, ParseError, ScoutError  # noqa: E402

__all__ = [
    "__version__",
    "ContentAnalyzer",
    "PageSignals",
    "CrawlResult",
    "Engine",
    "build_crawl_graph",
    "extract_signals",
    "is_admissible",
    "FetchError",
    "ParseError",
    "ScoutError",
]
