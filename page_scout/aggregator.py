# File: page_scout/aggregator.py
"""page_scout.aggregator: сборка результатов обхода и анализа в единый отчёт."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, TypedDict

from page_scout.analyzer import PageSignals
from page_scout.crawler.models import CrawlResult


class FailureInfo(TypedDict):
    """Адрес, который не удалось загрузить или разобрать."""

    url: str
    reason: str


@dataclass(slots=True)
class ScoutReport:
    """Результаты одного запуска: посещённые адреса, ошибки и сигналы seed-страницы."""

    seed: str
    max_depth: int
    pages: List[str] = field(default_factory=list)
    failures: List[FailureInfo] = field(default_factory=list)
    signals: Optional[Dict[str, Any]] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(crawl: CrawlResult, signals: Optional[PageSignals] = None) -> ScoutReport:
    """Собирает CrawlResult и (необязательно) PageSignals в ScoutReport."""
    return ScoutReport(
        seed=crawl.seed,
        max_depth=crawl.max_depth,
        pages=list(crawl.pages),
        failures=[{"url": url, "reason": reason} for url, reason in crawl.failures.items()],
        signals=signals.as_dict() if signals is not None else None,
    )
