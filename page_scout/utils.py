# File: page_scout/utils.py
"""page_scout.utils: чтение словарей и нормализация пробелов."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from page_scout.logger import logger

__all__: Sequence[str] = (
    "collapse_whitespace",
    "read_wordlist",
)


def collapse_whitespace(text: str) -> str:
    """Схлопывает серии пробельных символов в один пробел и обрезает края."""
    return " ".join(text.split())


def read_wordlist(path: Union[str, Path]) -> List[str]:
    """Читает wordlist, возвращает непустые строки без пробелов."""
    p = Path(path).expanduser()
    if not p.exists():
        logger.error("Wordlist not found: %s", p)
        raise FileNotFoundError(f"Wordlist file not found: {p}")
    words = [line.strip() for line in p.read_text(encoding="utf-8").splitlines() if line.strip()]
    logger.debug("Loaded %d entries from wordlist %s", len(words), p)
    return words
