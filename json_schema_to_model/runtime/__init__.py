"""
Runtime support for generated model classes.
"""

from .errors import BoundsError, DateParseError, EnumViolationError, TypeMismatchError, ValidationError
from .model import Model

__all__ = [
    "Model",
    "ValidationError",
    "BoundsError",
    "TypeMismatchError",
    "EnumViolationError",
    "DateParseError",
]
