"""
Errors raised by the accessors of generated model classes.

These are runtime failures of generated code, not of the generator itself.
"""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Base class for every validation failure raised by a generated setter."""

    pass


class BoundsError(ValidationError):
    """Raised when a number or an array length falls outside its declared bounds."""

    def __init__(self, value: Any, minimum: Any = None, maximum: Any = None, what: str = "value"):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        lower = "-inf" if minimum is None else minimum
        upper = "inf" if maximum is None else maximum
        super().__init__(f"{what} {value!r} is outside the bounds [{lower}, {upper}]")


class TypeMismatchError(ValidationError, TypeError):
    """Raised when an element of a pure array is not an instance of the expected class."""

    def __init__(self, index: int, expected: type, actual: Any):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(f"item [{index}] must be a {expected.__name__} instance, got {type(actual).__name__}")


class EnumViolationError(ValidationError):
    """Raised when a value is not one of the allowed enum values."""

    def __init__(self, value: Any, allowed: list[Any]):
        self.value = value
        self.allowed = list(allowed)
        choices = ", ".join(repr(v) for v in self.allowed)
        super().__init__(f"{value!r} must be one of: {choices}")


class DateParseError(ValidationError):
    """Raised when a value cannot be parsed into a datetime."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"{value!r} is not a valid date-time")
