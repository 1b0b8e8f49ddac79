"""
Global fixtures live here

Each test gets its own PathCache so cache state never leaks between tests.
"""
import pytest
from pathlib import Path

from safepath.core.cache import PathCache
from safepath.core.runtime import build_runtime, Runtime


@pytest.fixture
def cache() -> PathCache:
    """A small, fresh PathCache"""
    return PathCache(maxsize=4)


@pytest.fixture
def user_data() -> dict:
    """Nested sample data used across accessor and facade tests"""
    return {
        "user": {
            "name": "John",
            "age": 30,
            "profile": {
                "email": "john@example.com",
                "address": {"city": "Paris", "country": "France"},
            },
            "hobbies": ["coding", "reading"],
        },
        "settings": {"theme": "dark", "notifications": True},
    }


@pytest.fixture
def test_runtime(tmp_path: Path, monkeypatch) -> Runtime:
    """
    Creates a temporary Runtime for testing
    """
    monkeypatch.delenv("SAFEPATH_CACHE_SIZE", raising=False)
    rt = build_runtime(settings_dir=tmp_path / "settings", verbose=False)
    yield rt
