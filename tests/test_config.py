# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from sitemapper.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("root_url: http://example.com\nconcurrency: 3", ".yaml", None),
        (json.dumps({"root_url": "http://example.com", "concurrency": 3}), ".json", None),
        ("concurrency: 0", ".yaml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("root_url: [unclosed", ".yml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{not json", ".json", ValueError),
        ("root_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.root_url == "http://example.com"
        assert cfg.concurrency == 3
        assert cfg.timeout == 30.0


def test_defaults_without_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == CrawlerConfig()
    assert cfg.concurrency == 8
    assert cfg.timeout == 30.0


def test_default_file_is_picked_up(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("root_url: https://site.test/\n", encoding="utf-8")
    assert load_config(None).root_url == "https://site.test/"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("root", ["example.com", "/relative", "ftp://example.com", "http://"])
def test_root_url_must_be_absolute_http(root):
    with pytest.raises(ValidationError):
        CrawlerConfig(root_url=root)


def test_root_url_is_stripped():
    assert CrawlerConfig(root_url="  http://example.com  ").root_url == "http://example.com"


def test_config_is_frozen_and_override_revalidates():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.concurrency = 2
    updated = cfg.override(concurrency=2, timeout=None)
    assert updated.concurrency == 2
    assert updated.timeout == cfg.timeout
    with pytest.raises(ValidationError):
        cfg.override(concurrency=0)
