"""
Tests for settings persistence and Runtime construction.
"""
import json
from pathlib import Path

import pytest

from safepath import s
from safepath.core.runtime import build_runtime, Runtime
from safepath.core.settings import load_settings, save_settings, Settings, SETTINGS_FILE


def test_settings_round_trip(tmp_path: Path):
    settings = Settings(cache_size=10, immutable=True, strict=False)
    path = save_settings(tmp_path, settings)
    assert path.name == SETTINGS_FILE
    assert load_settings(tmp_path) == settings


def test_settings_from_dict_ignores_unknown_keys():
    settings = Settings.from_dict({"cache_size": "25", "colour": "blue"})
    assert settings.cache_size == 25
    assert settings.strict is True


def test_load_settings_failsafe(tmp_path: Path):
    assert load_settings(tmp_path) == Settings()
    (tmp_path / SETTINGS_FILE).write_text("{not json", encoding="utf-8")
    assert load_settings(tmp_path) == Settings()
    (tmp_path / SETTINGS_FILE).write_text('{"cache_size": "lots"}', encoding="utf-8")
    assert load_settings(tmp_path) == Settings()


@pytest.mark.parametrize("content", [
    '{"cache_size": 0}',
    '{"cache_size": -3}',
    '{"immutable": "false"}',
    '{"strict": 0}',
])
def test_load_settings_rejects_invalid_values(tmp_path: Path, content: str):
    (tmp_path / SETTINGS_FILE).write_text(content, encoding="utf-8")
    assert load_settings(tmp_path) == Settings()


def test_runtime_falls_back_on_invalid_cache_size(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("SAFEPATH_CACHE_SIZE", raising=False)
    (tmp_path / SETTINGS_FILE).write_text('{"cache_size": 0}', encoding="utf-8")
    rt = build_runtime(settings_dir=tmp_path)
    assert rt.cache.maxsize == Settings().cache_size


def test_settings_from_dict_validates_fields():
    with pytest.raises(ValueError, match="at least 1"):
        Settings.from_dict({"cache_size": 0})
    with pytest.raises(TypeError, match="immutable must be a boolean"):
        Settings.from_dict({"immutable": "false"})


def test_runtime_defaults(test_runtime: Runtime):
    assert test_runtime.settings == Settings()
    assert test_runtime.cache.maxsize == Settings().cache_size
    assert test_runtime.logger.name == "safepath"


def test_runtime_precedence(tmp_path: Path, monkeypatch):
    """Explicit argument > environment variable > settings file > default"""
    save_settings(tmp_path, Settings(cache_size=50))
    monkeypatch.delenv("SAFEPATH_CACHE_SIZE", raising=False)
    assert build_runtime(settings_dir=tmp_path).cache.maxsize == 50

    monkeypatch.setenv("SAFEPATH_CACHE_SIZE", "20")
    assert build_runtime(settings_dir=tmp_path).cache.maxsize == 20
    assert build_runtime(settings_dir=tmp_path, cache_size=5).cache.maxsize == 5


def test_runtime_rejects_bad_env(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("SAFEPATH_CACHE_SIZE", "many")
    with pytest.raises(ValueError, match="SAFEPATH_CACHE_SIZE"):
        build_runtime(settings_dir=tmp_path)


def test_bind_uses_runtime_cache_and_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("SAFEPATH_CACHE_SIZE", raising=False)
    save_settings(tmp_path, Settings(immutable=True, strict=False))
    rt = build_runtime(settings_dir=tmp_path)
    data = {"a": {"b": 1}}

    sp = rt.bind(data)
    assert sp.cache is rt.cache
    clone = sp.set("a.b", 2)
    assert data["a"]["b"] == 1 and clone["a"]["b"] == 2
    assert sp.validate_and_set("a.b", "x", s.number()) is data
    assert "a.b" in rt.cache

    assert rt.bind(data, immutable=False).set("a.b", 3) is data
    rt.clear_cache()
    assert len(rt.cache) == 0
