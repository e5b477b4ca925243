# File: page_scout/stopwords.py
"""page_scout.stopwords: наборы стоп-слов по языкам и сборка итогового множества."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Sequence, Union

from page_scout.logger import logger
from page_scout.utils import read_wordlist

__all__: Sequence[str] = ("StopwordSet", "LANGUAGES", "build_stopwords")

StopwordSet = FrozenSet[str]

LANGUAGES: Dict[str, StopwordSet] = {
    "en": frozenset(
        """
        a an the and or but if while with of at by for to in on up out over
        under as is it this that these those he she they we you i me him her
        them us my your
        """.split()
    ),
    "es": frozenset(
        """
        un una unos unas el la los las y o pero si mientras con de en sobre
        bajo por es esto eso estos esas él ella ellos nosotros tú yo te le nos
        """.split()
    ),
    "fr": frozenset(
        """
        une des les et ou mais pendant avec à dans sur sous pour est ce cette
        ces il elle ils nous vous je
        """.split()
    ),
}


def build_stopwords(
    languages: Iterable[str] = ("en", "es", "fr"),
    extra_files: Iterable[Union[str, Path]] = (),
) -> StopwordSet:
    """Объединяет встроенные наборы языков и пользовательские словари.

    Слова из файлов приводятся к нижнему регистру, как и токены текста.
    Неизвестный язык -> KeyError.
    """
    words: set[str] = set()
    for lang in languages:
        try:
            words |= LANGUAGES[lang]
        except KeyError:
            raise KeyError(f"Unknown stopword language: {lang!r}") from None
    for path in extra_files:
        words.update(word.lower() for word in read_wordlist(path))
    logger.debug("Stopword set: %d words", len(words))
    return frozenset(words)
