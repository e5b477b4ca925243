# File: page_scout/analyzer.py
"""page_scout.analyzer: извлечение заголовка, h1/h2 и ключевых слов из документа.

Пример::

    analyzer = ContentAnalyzer(build_stopwords(["en"]))
    signals = analyzer.analyze(parse_html(html))
    signals.keywords  # ['cat', 'hat', ...]
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from page_scout.config import ScoutConfig
from page_scout.crawler.fetcher import Fetcher, PageFetcher, open_session
from page_scout.logger import logger
from page_scout.parser.html_parser import DEFAULT_SKIP_TAGS, extract_text, is_text, parse_html
from page_scout.stopwords import StopwordSet, build_stopwords
from page_scout.utils import collapse_whitespace

__all__ = ["PageSignals", "ContentAnalyzer", "fetch_signals"]

HEADING_TAGS = ["h1", "h2"]


@dataclass(slots=True)
class PageSignals:
    """Сигналы одной страницы; между страницами не объединяются."""

    title: str = ""
    headings: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ContentAnalyzer:
    """Строит PageSignals по разобранному документу.

    Стоп-слова и пропускаемые теги передаются явно, глобального состояния нет.
    """

    def __init__(
        self,
        stopwords: StopwordSet,
        skip_tags: Collection[str] = DEFAULT_SKIP_TAGS,
        normalize_title: bool = False,
    ) -> None:
        self.stopwords = stopwords
        self.skip_tags = frozenset(skip_tags)
        self.normalize_title = normalize_title

    @classmethod
    def from_config(cls, config: ScoutConfig) -> ContentAnalyzer:
        stopwords = build_stopwords(config.languages, config.stopword_files.values())
        return cls(stopwords, config.skip_tags, config.normalize_title)

    def analyze(self, document: BeautifulSoup) -> PageSignals:
        signals = PageSignals(title=self.title(document))
        for tag in document.find_all(HEADING_TAGS):
            text = extract_text(tag, self.skip_tags)
            if text:
                signals.headings.append(text)
        signals.keywords = self.keywords(extract_text(document, self.skip_tags))
        return signals

    def title(self, document: BeautifulSoup) -> str:
        """Текст первого <title>, у которого первый потомок - текстовый узел.

        Пробелы сохраняются как есть, если не включён normalize_title.
        """
        for tag in document.find_all("title"):
            if not isinstance(tag, Tag) or not tag.contents:
                continue
            first = tag.contents[0]
            if is_text(first):
                return collapse_whitespace(str(first)) if self.normalize_title else str(first)
        return ""

    def keywords(self, text: str) -> List[str]:
        """Токены в нижнем регистре без стоп-слов; порядок и повторы сохраняются."""
        tokens = (token.lower() for token in text.split())
        return [token for token in tokens if token not in self.stopwords]


async def fetch_signals(
    address: str,
    config: Optional[ScoutConfig] = None,
    fetcher: Optional[PageFetcher] = None,
    analyzer: Optional[ContentAnalyzer] = None,
) -> PageSignals:
    """Загружает одну страницу и анализирует её.

    FetchError и ParseError пробрасываются вызывающему; частичных сигналов нет.
    """
    cfg = config or ScoutConfig()
    analyzer = analyzer or ContentAnalyzer.from_config(cfg)
    if fetcher is not None:
        page = await fetcher.fetch(address)
    else:
        async with open_session(cfg) as session:
            page = await Fetcher(session, cfg).fetch(address)
    document = parse_html(page.content, address)
    signals = analyzer.analyze(document)
    logger.debug(
        "Signals for %s: %d headings, %d keywords", address, len(signals.headings), len(signals.keywords)
    )
    return signals
