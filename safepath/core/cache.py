"""
Bounded cache of parsed dot paths.

Paths repeat a lot across unrelated calls, so splitting is memoized. Eviction
is first-in-first-out: a cache hit does not refresh an entry's position.
Not thread-safe, callers sharing a cache across threads must lock around it.
"""
import logging

logger = logging.getLogger("safepath.cache")

DEFAULT_MAXSIZE = 1000


class PathCache:
    """FIFO-bounded mapping of path string -> tuple of segments."""

    def __init__(self, maxsize: int = DEFAULT_MAXSIZE):
        if maxsize < 1:
            raise ValueError(f"PathCache maxsize must be at least 1, got {maxsize}")
        self.maxsize = maxsize
        self._entries: dict[str, tuple[str, ...]] = {}  # dicts keep insertion order
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def parse(self, path: str) -> tuple[str, ...]:
        """Split a dot path into segments, reusing a cached result when present."""
        cached = self._entries.get(path)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        segments = tuple(path.split("."))
        if len(self._entries) >= self.maxsize:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug("Evicted path %r from cache (maxsize=%d)", oldest, self.maxsize)
        self._entries[path] = segments
        return segments

    def clear(self) -> None:
        """Drop every entry and reset the hit/miss counters."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        logger.debug("Path cache cleared")


# Shared by every SafePath that isn't given its own cache
DEFAULT_CACHE = PathCache()


def parse_path(path: str) -> tuple[str, ...]:
    """Parse a path with the process-wide default cache."""
    return DEFAULT_CACHE.parse(path)


def clear_path_cache() -> None:
    """Reset the process-wide default cache. Affects every consumer."""
    DEFAULT_CACHE.clear()
