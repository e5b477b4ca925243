# File: page_scout/errors.py
"""page_scout.errors: исключения загрузки и разбора страниц."""

from __future__ import annotations

__all__ = ["ScoutError", "FetchError", "ParseError"]


class ScoutError(Exception):
    """Базовое исключение PageScout, привязанное к адресу страницы."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class FetchError(ScoutError):
    """Сбой транспорта: DNS, соединение, таймаут, некорректный адрес."""


class ParseError(ScoutError):
    """Поток байт не удалось разобрать как разметку."""
