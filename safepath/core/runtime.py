"""
Runtime context: settings, logging and a path cache shared by bound dicts.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from collections.abc import MutableMapping
from pathlib import Path

from safepath.core.cache import PathCache
from safepath.core.facade import SafePath
from safepath.core.settings import load_settings, Settings
from safepath.core import paths


@dataclass
class Runtime:
    """A configured environment for binding dicts."""
    settings_dir: Path
    settings: Settings
    cache: PathCache
    logger: logging.Logger

    def bind(self, data: MutableMapping, **overrides) -> SafePath:
        """
        Wrap `data` in a SafePath that uses this Runtime's cache and defaults.
        `immutable` and `strict` can be overridden per binding.
        """
        options = {
            "immutable": self.settings.immutable,
            "strict": self.settings.strict,
            **overrides,
        }
        return SafePath(data, cache=self.cache, **options)

    def clear_cache(self) -> None:
        """Reset this Runtime's path cache."""
        self.cache.clear()
        self.logger.debug("Cleared path cache (maxsize=%d)", self.cache.maxsize)

# --- Runtime management ---

def build_runtime(
    *,
    settings_dir: Path | None = None,
    cache_size: int | None = None,
    verbose: bool | None = None,
) -> Runtime:
    """Builds and returns a Runtime object for SafePath."""
    # 1. Settings
    if settings_dir is None:
        settings_dir = paths.default_settings_dir()
    settings = load_settings(settings_dir)
    if cache_size is not None:
        settings.cache_size = cache_size
    elif env := os.getenv("SAFEPATH_CACHE_SIZE"):
        try:
            settings.cache_size = int(env)
        except ValueError as e:
            raise ValueError(f"SAFEPATH_CACHE_SIZE must be an integer, got {env!r}") from e
    if verbose is not None:
        settings.verbose = verbose
    # 2. Logging
    logger = logging.getLogger("safepath")
    if not logging.getLogger().hasHandlers():
        # don't override the host application's logging if it's already set up
        logging.basicConfig(
            level=logging.DEBUG if settings.verbose else logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    logger.setLevel(logging.DEBUG if settings.verbose else logging.INFO)
    # 3. Create context
    rt = Runtime(
        settings_dir=settings_dir,
        settings=settings,
        cache=PathCache(settings.cache_size),
        logger=logger,
    )
    logger.debug("Built runtime with cache_size=%d", settings.cache_size)
    return rt
