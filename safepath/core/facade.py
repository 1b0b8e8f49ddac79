"""
SafePath binds one nested dict to the dot-path helpers and the validators.
"""
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, TYPE_CHECKING

from safepath.core.cache import PathCache
from safepath.core.dict_path import (
    MISSING,
    deep_merge,
    delete_by_path,
    get_all_paths,
    get_by_path,
    has_path,
    is_valid_path,
    set_by_path,
)
from safepath.exceptions import SchemaValidationError

if TYPE_CHECKING:
    from safepath.schema.results import ValidationResult
    from safepath.schema.validators import BaseValidator

logger = logging.getLogger("safepath.facade")


class SafePath:
    """
    Dot-path access to a bound dict.

    In mutable mode (default) writes go straight into the bound dict and it is
    returned. In immutable mode writes return a modified deep copy and the
    bound dict is left alone; SafePath keeps pointing at the original, so
    callers wanting to continue from the copy must bind it again.
    """

    def __init__(
        self,
        data: MutableMapping,
        *,
        immutable: bool = False,
        strict: bool = True,
        cache: PathCache | None = None,
    ):
        self._data = data
        self.immutable = immutable
        self.strict = strict
        self.cache = cache

    def __repr__(self) -> str:
        return f"SafePath({self._data!r}, immutable={self.immutable})"

    @property
    def data(self) -> MutableMapping:
        """The bound root dict."""
        return self._data

    def _immutable(self, override: bool | None) -> bool:
        return self.immutable if override is None else override

    # --- Access ---

    def get(self, path: str, default=None) -> Any:
        """Value at `path`, or `default` if any step of the path is missing."""
        return get_by_path(self._data, path, default=default, cache=self.cache)

    def has(self, path: str) -> bool:
        """True if every key along `path` exists, whatever its value."""
        return has_path(self._data, path, cache=self.cache)

    def set(self, path: str, value: Any, *, immutable: bool | None = None) -> MutableMapping:
        """Store `value` at `path`, creating missing intermediate dicts."""
        return set_by_path(
            self._data, path, value, immutable=self._immutable(immutable), cache=self.cache
        )

    def delete(self, path: str, *, immutable: bool | None = None) -> MutableMapping:
        """Remove the key at `path`. Does nothing if the path does not resolve."""
        return delete_by_path(
            self._data, path, immutable=self._immutable(immutable), cache=self.cache
        )

    def update(
        self,
        path: str,
        updater: Callable[[Any], Any],
        *,
        immutable: bool | None = None,
    ) -> MutableMapping:
        """Replace the value at `path` with `updater(current)`. Current may be None."""
        current = self.get(path)
        return self.set(path, updater(current), immutable=immutable)

    def merge(self, partial: Mapping, *, immutable: bool | None = None) -> MutableMapping:
        """
        Deep-merge `partial` into the bound dict. Mutable mode writes the merged
        top-level keys back into the bound dict and returns the bound dict itself
        (not a shallow copy), so the result is `self.data`.
        """
        if self._immutable(immutable):
            return deep_merge(self._data, partial, immutable=True)
        merged = deep_merge(self._data, partial)
        self._data.update(merged)
        return self._data

    def get_all_paths(self) -> list[str]:
        """Every dot path reachable through nested dicts. Lists are leaves."""
        return get_all_paths(self._data)

    def is_valid_path(self, path: Any) -> bool:
        """True for a non-empty string path that exists in the bound dict."""
        return is_valid_path(self._data, path, cache=self.cache)

    # --- Validation ---

    def validate(self, path: str, schema: "BaseValidator") -> "ValidationResult":
        """Validate the value currently stored at `path`. Absent values are MISSING."""
        return schema.validate(get_by_path(self._data, path, default=MISSING, cache=self.cache))

    def safe_validate(self, path: str, schema: "BaseValidator") -> "ValidationResult":
        """Same as `validate`, via `schema.safe_parse`."""
        return schema.safe_parse(get_by_path(self._data, path, default=MISSING, cache=self.cache))

    def validate_and_set(
        self,
        path: str,
        value: Any,
        schema: "BaseValidator",
        *,
        strict: bool | None = None,
        immutable: bool | None = None,
    ) -> MutableMapping:
        """
        Validate `value` and, if it passes, store the validated data at `path`.
        A validated MISSING (optional and absent) removes the key instead.

        On failure, strict mode raises SchemaValidationError whose message
        locates every issue from the bound root (e.g. `user.age: ...`);
        otherwise the root is returned untouched.
        """
        result = schema.validate(value)
        if not result.success:
            message = f'Validation failed for path "{path}": ' + ", ".join(
                e.qualified(path).describe() for e in result.errors
            )
            if (self.strict if strict is None else strict):
                raise SchemaValidationError(message, result.errors)
            logger.warning("%s (value not set)", message)
            return self._data

        if result.data is MISSING:
            return self.delete(path, immutable=immutable)
        return self.set(path, result.data, immutable=immutable)


def safe_path(data: MutableMapping, **options) -> SafePath:
    """Shorthand for SafePath(data, **options)."""
    return SafePath(data, **options)
