# === FILE: page_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации PageScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from page_scout.stopwords import LANGUAGES

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; PageScout/1.0)"


class ScoutConfig(BaseModel):
    """Конфигурация обхода и анализа страниц."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed: Optional[str] = Field(None, description="Стартовый адрес по умолчанию.")
    max_depth: int = Field(1, ge=0, description="Максимальная глубина обхода ссылок.")
    timeout: Optional[float] = Field(
        None, gt=0, description="Таймаут на один запрос (секунд); None - без ограничения."
    )
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    concurrency: int = Field(1, ge=1, description="Число параллельных загрузчиков; 1 - строгий BFS.")
    languages: List[str] = Field(
        default_factory=lambda: ["en", "es", "fr"], description="Языки встроенных стоп-слов."
    )
    stopword_files: Dict[str, str] = Field(
        default_factory=dict, description="Дополнительные словари стоп-слов."
    )
    skip_tags: List[str] = Field(
        default_factory=lambda: ["script", "style"],
        description="Теги, поддеревья которых не дают текста.",
    )
    normalize_title: bool = Field(False, description="Схлопывать пробелы в заголовке <title>.")

    @field_validator("seed", mode="before")
    def _strip_seed(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("languages")
    def _known_languages(cls, v: List[str]) -> List[str]:
        unknown = [lang for lang in v if lang not in LANGUAGES]
        if unknown:
            raise ValueError(f"unknown stopword languages: {', '.join(unknown)}")
        return v

    @field_validator("skip_tags")
    def _lower_tags(cls, v: List[str]) -> List[str]:
        return [tag.lower() for tag in v]

    @model_validator(mode="after")
    def _check_stopword_files_exist(self) -> ScoutConfig:
        missing = [p for p in self.stopword_files.values() if not Path(p).expanduser().is_file()]
        if missing:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), missing[0])
        return self


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ScoutConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScoutConfig.
    Без пути берёт configs/default.yaml, а если его нет - значения по умолчанию.
    Явно указанный, но отсутствующий файл -> FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ScoutConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ScoutConfig(**data)


__all__ = ["ScoutConfig", "load_config", "DEFAULT_USER_AGENT"]
