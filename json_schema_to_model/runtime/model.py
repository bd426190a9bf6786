"""
Base capability set shared by every generated model class.

Generated classes derive from :class:`Model` and never from each other. The
base class provides:

- generic ``get_<field>()`` / ``set_<field>(value)`` accessors for every
  declared field; explicit setters emitted by the generator take precedence,
- the validation primitives called from generated setters,
- structural helpers used by ``to_dict()``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any, ClassVar

from .errors import BoundsError, DateParseError, EnumViolationError, TypeMismatchError

_MISSING = object()


class Model:
    """Base class for generated models."""

    # attribute name -> schema property name, filled in by generated classes
    _FIELDS: ClassVar[dict[str, str]] = {}

    def __init__(self, **values: Any) -> None:
        schema_names = {schema_name: attribute for attribute, schema_name in self._FIELDS.items()}
        for key, value in values.items():
            attribute = key if key in self._FIELDS else schema_names.get(key)
            if attribute is None:
                raise TypeError(f"{type(self).__name__} has no field {key!r}")
            getattr(self, f"set_{attribute}")(value)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only called when regular lookup fails, so generated setters win.
        prefix, _, attribute = name.partition("_")
        if attribute in type(self)._FIELDS:
            if prefix == "get":
                return lambda: self._get_field(attribute)
            if prefix == "set":
                return lambda value: self._set_field(attribute, value)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def _get_field(self, attribute: str) -> Any:
        value = self.__dict__.get(attribute, _MISSING)
        if value is _MISSING:
            raise AttributeError(f"{type(self).__name__}.{attribute} has not been set")
        return value

    def _set_field(self, attribute: str, value: Any) -> Model:
        setattr(self, attribute, value)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the structural form of the model, keyed by schema property name."""
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        fields = ", ".join(f"{self._FIELDS[k]}={v!r}" for k, v in self.__dict__.items() if k in self._FIELDS)
        return f"{type(self).__name__}({fields})"

    # Validation primitives used by generated setters

    def _check_if_pure_array(self, values: list[Any], cls: type) -> None:
        for index, item in enumerate(values):
            if not isinstance(item, cls):
                raise TypeMismatchError(index, cls, item)

    def _check_array_bounds(self, values: list[Any], minimum: int | None, maximum: int | None) -> None:
        size = len(values)
        if (minimum is not None and size < minimum) or (maximum is not None and size > maximum):
            raise BoundsError(size, minimum, maximum, what="array length")

    def _check_integer_bounds(self, value: int, minimum: int | None, maximum: int | None) -> None:
        self._check_bounds(value, minimum, maximum)

    def _check_float_bounds(self, value: float, minimum: float | None, maximum: float | None) -> None:
        self._check_bounds(value, minimum, maximum)

    def _check_bounds(self, value: Any, minimum: Any, maximum: Any) -> None:
        if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
            raise BoundsError(value, minimum, maximum)

    def _check_enum_bounds(self, value: Any, allowed: list[Any]) -> None:
        if value not in allowed:
            raise EnumViolationError(value, allowed)

    def _parse_date(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value)
            except ValueError as e:
                raise DateParseError(value) from e
        raise DateParseError(value)

    def _convert_pure_array(self, values: list[Any]) -> list[Any]:
        return [item.to_dict() if isinstance(item, Model) else item for item in values]
