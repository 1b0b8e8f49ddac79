"""
Composable validators for plain Python values.

Each validator is a frozen dataclass. Builder methods (`min`, `optional`,
`transform`, ...) return a modified copy, so one base validator can be shared
and specialised in several directions without interference.

Every configured constraint is checked and all violations are reported
together; only a failed type check stops further checks for that value.
Container validators collect the issues of every child, with paths qualified
by the key or `[index]` they were found under.
"""
from abc import ABC, abstractmethod
import copy
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Callable

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from safepath.core.dict_path import MISSING
from safepath.exceptions import SchemaValidationError
from safepath.schema.results import (
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)

_EMAIL_SHAPE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_URL_ADAPTER = TypeAdapter(AnyUrl)


def _fail(message: str, received: Any, expected: str | None = None) -> ValidationFailure:
    return ValidationFailure(
        errors=[ValidationIssue(message=message, received=received, expected=expected)]
    )


@dataclass(frozen=True)
class BaseValidator(ABC):
    """
    Shared modifier handling. Subclasses implement `_check` for their type.

    Modifiers are applied in a fixed order before the type check:
    optional (value is MISSING), nullable (value is None), then default
    (value is MISSING or None). A transform runs on the default and on
    successfully checked values, never on failures.
    """
    is_optional: bool = False
    is_nullable: bool = False
    default_value: Any = MISSING
    transform_fn: Callable[[Any], Any] | None = None

    @abstractmethod
    def _check(self, value: Any) -> ValidationResult:
        """Type check and constraints for this kind of value."""

    def _finish(self, data: Any) -> ValidationSuccess:
        if self.transform_fn is not None:
            data = self.transform_fn(data)
        return ValidationSuccess(data=data)

    def validate(self, value: Any = MISSING) -> ValidationResult:
        """Check `value` and return a success or failure outcome. Never raises."""
        if value is MISSING and self.is_optional:
            return ValidationSuccess(data=MISSING)
        if value is None and self.is_nullable:
            return ValidationSuccess(data=None)
        if (value is MISSING or value is None) and self.default_value is not MISSING:
            return self._finish(copy.deepcopy(self.default_value))
        result = self._check(value)
        if not result.success:
            return result
        return self._finish(result.data)

    def parse(self, value: Any = MISSING) -> Any:
        """Validated data, or raise SchemaValidationError listing every issue."""
        result = self.validate(value)
        if not result.success:
            details = ", ".join(e.describe() for e in result.errors)
            raise SchemaValidationError(f"Validation failed: {details}", result.errors)
        return result.data

    def safe_parse(self, value: Any = MISSING) -> ValidationResult:
        return self.validate(value)

    # --- Modifiers ---

    def optional(self):
        """Accept an absent value (MISSING)."""
        return replace(self, is_optional=True)

    def nullable(self):
        """Accept None."""
        return replace(self, is_nullable=True)

    def default(self, value: Any):
        """Substitute `value` when the input is absent or None."""
        return replace(self, default_value=value)

    def transform(self, fn: Callable[[Any], Any]):
        """Map the validated value through `fn`."""
        return replace(self, transform_fn=fn)


@dataclass(frozen=True)
class StringValidator(BaseValidator):
    min_length: int | None = None
    max_length: int | None = None
    pattern: re.Pattern | None = None
    email_only: bool = False
    url_only: bool = False

    def _check(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return _fail("Expected string", value, "string")

        issues = []
        if self.min_length is not None and len(value) < self.min_length:
            issues.append(ValidationIssue(
                message=f"String must be at least {self.min_length} characters",
                received=value, expected=f"min length {self.min_length}",
            ))
        if self.max_length is not None and len(value) > self.max_length:
            issues.append(ValidationIssue(
                message=f"String must be at most {self.max_length} characters",
                received=value, expected=f"max length {self.max_length}",
            ))
        if self.pattern is not None and not self.pattern.search(value):
            issues.append(ValidationIssue(
                message=f"String does not match pattern {self.pattern.pattern}",
                received=value, expected=f"pattern {self.pattern.pattern}",
            ))
        if self.email_only and not _EMAIL_SHAPE.fullmatch(value):
            issues.append(ValidationIssue(
                message="Invalid email format", received=value, expected="valid email",
            ))
        if self.url_only:
            try:
                _URL_ADAPTER.validate_python(value)
            except PydanticValidationError:
                issues.append(ValidationIssue(
                    message="Invalid URL format", received=value, expected="valid URL",
                ))

        if issues:
            return ValidationFailure(errors=issues)
        return ValidationSuccess(data=value)

    def min(self, length: int) -> "StringValidator":
        return replace(self, min_length=length)

    def max(self, length: int) -> "StringValidator":
        return replace(self, max_length=length)

    def regex(self, pattern: str | re.Pattern) -> "StringValidator":
        """Require a match anywhere in the string (`re.search`)."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        return replace(self, pattern=pattern)

    def email(self) -> "StringValidator":
        return replace(self, email_only=True)

    def url(self) -> "StringValidator":
        return replace(self, url_only=True)


@dataclass(frozen=True)
class NumberValidator(BaseValidator):
    minimum: float | None = None
    maximum: float | None = None
    integer_only: bool = False
    positive_only: bool = False

    def _check(self, value: Any) -> ValidationResult:
        # bool is an int subclass but not a number here
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or (isinstance(value, float) and math.isnan(value))
        ):
            return _fail("Expected number", value, "number")

        issues = []
        if self.minimum is not None and value < self.minimum:
            issues.append(ValidationIssue(
                message=f"Number must be at least {self.minimum}",
                received=value, expected=f">= {self.minimum}",
            ))
        if self.maximum is not None and value > self.maximum:
            issues.append(ValidationIssue(
                message=f"Number must be at most {self.maximum}",
                received=value, expected=f"<= {self.maximum}",
            ))
        if self.integer_only and isinstance(value, float) and not value.is_integer():
            issues.append(ValidationIssue(
                message="Expected integer", received=value, expected="integer",
            ))
        if self.positive_only and value <= 0:
            issues.append(ValidationIssue(
                message="Expected positive number", received=value, expected="positive number",
            ))

        if issues:
            return ValidationFailure(errors=issues)
        return ValidationSuccess(data=value)

    def min(self, value: float) -> "NumberValidator":
        return replace(self, minimum=value)

    def max(self, value: float) -> "NumberValidator":
        return replace(self, maximum=value)

    def int(self) -> "NumberValidator":  # pylint: disable=invalid-name
        return replace(self, integer_only=True)

    def positive(self) -> "NumberValidator":
        return replace(self, positive_only=True)


@dataclass(frozen=True)
class BooleanValidator(BaseValidator):
    def _check(self, value: Any) -> ValidationResult:
        if not isinstance(value, bool):
            return _fail("Expected boolean", value, "boolean")
        return ValidationSuccess(data=value)


@dataclass(frozen=True, kw_only=True)
class ArrayValidator(BaseValidator):
    """A list (or tuple) whose every element passes `element`."""
    element: BaseValidator

    def _check(self, value: Any) -> ValidationResult:
        if not isinstance(value, (list, tuple)):
            return _fail("Expected list", value, "list")

        items = []
        issues = []
        for i, item in enumerate(value):
            result = self.element.validate(item)
            if result.success:
                items.append(result.data)
            else:
                issues.extend(e.qualified(f"[{i}]") for e in result.errors)

        if issues:
            return ValidationFailure(errors=issues)
        return ValidationSuccess(data=items)


@dataclass(frozen=True, kw_only=True)
class ObjectValidator(BaseValidator):
    """
    A mapping checked key by key against `shape`. Keys not in the shape are
    ignored, and the input is never mutated: valid data is collected into a
    new dict. Keys that validate to MISSING (absent and optional) are left out.
    """
    shape: Mapping[str, BaseValidator] = field(default_factory=dict)

    def _check(self, value: Any) -> ValidationResult:
        if not isinstance(value, Mapping):
            return _fail("Expected object", value, "object")

        data = {}
        issues = []
        for key, validator in self.shape.items():
            result = validator.validate(value.get(key, MISSING))
            if result.success:
                if result.data is not MISSING:
                    data[key] = result.data
            else:
                issues.extend(e.qualified(key) for e in result.errors)

        if issues:
            return ValidationFailure(errors=issues)
        return ValidationSuccess(data=data)
