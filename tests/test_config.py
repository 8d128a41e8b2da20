"""Tests for configuration loading and overrides."""

from __future__ import annotations

import json

from resume_matcher.utils import Config


def test_defaults_when_file_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("RESUME_MATCHER_UPLOAD_MAX_SIZE_MB", raising=False)
    config = Config(str(tmp_path / "missing.json"))

    assert config.get("upload.max_size_mb") == 5
    assert config.get("search.providers") == ["sample", "remotive", "greenhouse", "lever"]
    assert config.get("nope.nothing", "fallback") == "fallback"
    assert config.get_max_upload_bytes() == 5 * 1024 * 1024


def test_file_values_merge_with_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("RESUME_MATCHER_UPLOAD_MAX_SIZE_MB", raising=False)
    monkeypatch.delenv("RESUME_MATCHER_UPLOAD_MIN_TEXT_LENGTH", raising=False)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"upload": {"max_size_mb": 10}}), encoding="utf-8")

    config = Config(str(path))

    assert config.get("upload.max_size_mb") == 10
    assert config.get("upload.min_text_length") == 50


def test_defaults_are_not_shared_between_instances(tmp_path) -> None:
    first = Config(str(tmp_path / "a.json"))
    first.set("search.providers", ["lever"])

    second = Config(str(tmp_path / "b.json"))

    assert Config.DEFAULT_CONFIG["search"]["providers"] == ["sample", "remotive", "greenhouse", "lever"]
    assert second.config["search"]["providers"] == ["sample", "remotive", "greenhouse", "lever"]


def test_environment_overrides_file(config, monkeypatch) -> None:
    monkeypatch.setenv("RESUME_MATCHER_SEARCH_LIMIT", "25")
    monkeypatch.setenv("RESUME_MATCHER_STORAGE_DATA_DIR", "/srv/profiles")

    assert config.get("search.limit") == 25
    assert config.get_data_dir() == "/srv/profiles"


def test_save_and_reload(config) -> None:
    config.set("search.timeout", 10)
    config.save()

    reloaded = Config(str(config.config_path))

    assert reloaded.get("search.timeout") == 10
    assert reloaded.get("search.providers") == ["sample"]


def test_create_default_config(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    Config.create_default_config(str(path))

    assert json.loads(path.read_text(encoding="utf-8"))["storage"]["data_dir"] == "./profile_data"
