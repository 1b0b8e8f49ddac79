"""
Helpers to navigate and manipulate nested dicts via "dot paths".

Reads are forgiving: a missing key or a non-mapping value anywhere along the
path just means "not found". Writes create missing intermediate dicts, deletes
never invent structure to delete from.
"""
import copy
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from safepath.core.cache import DEFAULT_CACHE, PathCache

logger = logging.getLogger("safepath.dict_path")


class _Missing:
    """Marker for a value that is absent, as opposed to present and None."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "MISSING"


MISSING: Any = _Missing()


def _segments(path: str, cache: PathCache | None) -> tuple[str, ...]:
    return (DEFAULT_CACHE if cache is None else cache).parse(path)


def get_by_path(d: Mapping, path: str, *, default=None, cache: PathCache | None = None) -> Any:
    """Get a value from a nested dict via a dot-separated path."""
    if not path:
        return default
    current: Any = d
    for key in _segments(path, cache):
        if isinstance(current, Mapping) and key in current:
            current = current[key]
        else:
            return default
    return current


def has_path(d: Mapping, path: str, *, cache: PathCache | None = None) -> bool:
    """True if every key along the path exists. Falsy values still count."""
    current: Any = d
    for key in _segments(path, cache):
        if not isinstance(current, Mapping) or key not in current:
            return False
        current = current[key]
    return True


def is_valid_path(d: Mapping, path: Any, *, cache: PathCache | None = None) -> bool:
    """A non-empty string path that resolves in `d`."""
    return isinstance(path, str) and len(path) > 0 and has_path(d, path, cache=cache)


def set_by_path(
    d: MutableMapping,
    path: str,
    value: Any,
    *,
    immutable: bool = False,
    cache: PathCache | None = None,
) -> MutableMapping:
    """
    Set a value in a nested dict via a dot-separated path. Returns the root,
    or a modified deep copy of it when `immutable` is set.
    """
    *parents, last = _segments(path, cache)
    if not last:
        logger.debug("Ignoring set on path %r: empty final key", path)
        return d
    target = copy.deepcopy(d) if immutable else d
    current = target
    for key in parents:
        if key not in current or not isinstance(current[key], MutableMapping):
            current[key] = {}
        current = current[key]
    current[last] = value
    return target


def delete_by_path(
    d: MutableMapping,
    path: str,
    *,
    immutable: bool = False,
    cache: PathCache | None = None,
) -> MutableMapping:
    """Delete a key in a nested dict via a dot-separated path."""
    *parents, last = _segments(path, cache)
    if not last:
        return d
    target = copy.deepcopy(d) if immutable else d
    current: Any = target
    for key in parents:
        if not isinstance(current, Mapping) or key not in current:
            return target  # Key path does not exist; nothing to delete
        current = current[key]
    if isinstance(current, MutableMapping):
        current.pop(last, None)  # Remove the key if it exists
    return target


def deep_merge(target: Mapping, source: Mapping, immutable: bool = False) -> dict:
    """
    Recursively merge `source` into a copy of `target`.

    Mappings present on both sides are merged key by key. Anything else
    (scalars, lists, type mismatches) from `source` replaces the target value
    outright. MISSING values in `source` leave the target untouched.
    """
    result = copy.deepcopy(dict(target)) if immutable else dict(target)
    for key, source_value in source.items():
        target_value = result.get(key)
        if isinstance(source_value, Mapping) and isinstance(target_value, Mapping):
            result[key] = deep_merge(target_value, source_value, immutable)
        elif source_value is not MISSING:
            result[key] = source_value
    return result


def get_all_paths(d: Mapping, prefix: str = "") -> list[str]:
    """
    Every dot path reachable through nested mappings. Lists are leaves, their
    elements do not produce paths. Order is not guaranteed.
    """
    paths: list[str] = []
    stack: list[tuple[Mapping, str]] = [(d, prefix)]
    while stack:
        current, current_prefix = stack.pop()
        for key, value in current.items():
            new_path = f"{current_prefix}.{key}" if current_prefix else str(key)
            paths.append(new_path)
            if isinstance(value, Mapping):
                stack.append((value, new_path))
    return paths
