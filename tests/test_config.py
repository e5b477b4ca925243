# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from page_scout.config import DEFAULT_USER_AGENT, ScoutConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,loader,expect_exc",
    [
        ("seed: https://example.com\nmax_depth: 2", load_config, None),
        (json.dumps({"seed": "https://example.com", "max_depth": 2}), load_config, None),
        ("max_depth: -1", load_config, ValidationError),
        ("unknown_key: 1", load_config, ValidationError),
        ("languages: [en, xx]", load_config, ValidationError),
        ("not: a: mapping", load_config, ValueError),
        ("::invalid yaml", load_config, TypeError),
    ],
)
def test_load_config_variants(tmp_path, content, loader, expect_exc):
    # Write YAML or JSON based on content
    suffix = ".yaml" if not content.strip().startswith("{") else ".json"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            loader(cfg_path)
    else:
        cfg = loader(cfg_path)
        assert isinstance(cfg, ScoutConfig)
        assert cfg.seed == "https://example.com"
        assert cfg.max_depth == 2


def test_defaults():
    cfg = ScoutConfig()

    assert cfg.seed is None
    assert cfg.max_depth == 1
    assert cfg.timeout is None
    assert cfg.user_agent == DEFAULT_USER_AGENT
    assert cfg.concurrency == 1
    assert cfg.languages == ["en", "es", "fr"]
    assert cfg.skip_tags == ["script", "style"]
    assert cfg.normalize_title is False


def test_config_is_frozen():
    cfg = ScoutConfig()
    with pytest.raises(ValidationError):
        cfg.max_depth = 5  # type: ignore[misc]


def test_load_config_default_missing(tmp_path, monkeypatch):
    # Without configs/default.yaml the built-in defaults are used
    monkeypatch.chdir(tmp_path)

    assert load_config(None) == ScoutConfig()


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("max_depth: 4\n", encoding="utf-8")

    assert load_config(None).max_depth == 4


def test_explicit_path_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_file(tmp_path, "max_depth = 1", ".toml"))


def test_stopword_file_not_found(tmp_path):
    # Nonexistent stopword path triggers FileNotFoundError
    cfg_path = write_file(tmp_path, "stopword_files: {a: missing.txt}", ".yaml")
    with pytest.raises(FileNotFoundError):
        load_config(cfg_path)


def test_blank_seed_is_none():
    assert ScoutConfig(seed="   ").seed is None


def test_skip_tags_are_lowercased():
    assert ScoutConfig(skip_tags=["SCRIPT", "Nav"]).skip_tags == ["script", "nav"]


@pytest.mark.parametrize("field,value", [("timeout", 0), ("concurrency", 0), ("user_agent", "")])
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        ScoutConfig(**{field: value})
