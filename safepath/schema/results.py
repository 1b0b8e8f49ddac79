"""
Outcome of a validation: either a success carrying the (possibly transformed)
data, or a failure carrying at least one issue.
"""
from typing import Any, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class ValidationIssue(BaseModel):
    """One constraint violation, located relative to the validation root."""
    model_config = ConfigDict(frozen=True)

    path: str = ""  # "" at the root, "key.sub", "[2].name" for list items
    message: str
    received: Any = None
    expected: str | None = None

    def qualified(self, prefix: str) -> "ValidationIssue":
        """Copy of this issue with `prefix` prepended to its path."""
        path = f"{prefix}.{self.path}" if self.path else prefix
        return self.model_copy(update={"path": path})

    def describe(self) -> str:
        """`path: message` as used in fatal error messages."""
        return f"{self.path}: {self.message}"


class ValidationSuccess(BaseModel):
    success: Literal[True] = True
    data: Any = None


class ValidationFailure(BaseModel):
    success: Literal[False] = False
    errors: list[ValidationIssue] = Field(min_length=1)

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


ValidationResult = Union[ValidationSuccess, ValidationFailure]
