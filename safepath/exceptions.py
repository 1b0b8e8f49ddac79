"""
Exceptions raised by SafePath. Traversal misses are never errors; only
opting into fatal validation (parse, strict validate_and_set) raises.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from safepath.schema.results import ValidationIssue


class SchemaValidationError(ValueError):
    """A value failed schema validation. Carries every collected issue."""

    def __init__(self, message: str, errors: list["ValidationIssue"] | None = None):
        super().__init__(message)
        self.errors = list(errors or [])
