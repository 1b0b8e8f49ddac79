"""
SafePath: dot-path access to nested dicts, with composable runtime validation.

    from safepath import safe_path, s

    sp = safe_path({"user": {"name": "John"}})
    sp.set("user.profile.email", "john@example.com")
    sp.validate("user.name", s.string().min(1))
"""
from importlib.metadata import version, PackageNotFoundError

from safepath import schema as s
from safepath.core.cache import PathCache, clear_path_cache, parse_path
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
from safepath.core.facade import SafePath, safe_path
from safepath.core.runtime import Runtime, build_runtime
from safepath.core.settings import Settings
from safepath.exceptions import SchemaValidationError
from safepath.schema.results import (
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)

try:
    __version__ = version("safepath")
except PackageNotFoundError:
    __version__ = "unknown"
__app_name__ = "SafePath"
