"""
Schema builders. Usually imported as a namespace:

    from safepath import s
    user = s.object({"name": s.string().min(1), "age": s.number().int().min(0)})
"""
# pylint: disable=redefined-builtin
from collections.abc import Mapping

from safepath.schema.results import (
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)
from safepath.schema.validators import (
    ArrayValidator,
    BaseValidator,
    BooleanValidator,
    NumberValidator,
    ObjectValidator,
    StringValidator,
)


def string() -> StringValidator:
    return StringValidator()


def number() -> NumberValidator:
    return NumberValidator()


def boolean() -> BooleanValidator:
    return BooleanValidator()


def array(element: BaseValidator) -> ArrayValidator:
    return ArrayValidator(element=element)


def object(shape: Mapping[str, BaseValidator]) -> ObjectValidator:
    return ObjectValidator(shape=dict(shape))


__all__ = [
    "ArrayValidator",
    "BaseValidator",
    "BooleanValidator",
    "NumberValidator",
    "ObjectValidator",
    "StringValidator",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
    "array",
    "boolean",
    "number",
    "object",
    "string",
]
