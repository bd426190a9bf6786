"""
Description of the base capability set that generated classes compose.

The emitter never hardcodes the runtime base class: it renders every
validation rule through the names held by a :class:`CapabilitySet`, so the
generated code can target another base module with the same primitives.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class CapabilitySet:
    """Module, class and primitive method names of the runtime base class."""

    module: str = "json_schema_to_model.runtime"
    class_name: str = "Model"

    check_pure_array: str = "_check_if_pure_array"
    check_array_bounds: str = "_check_array_bounds"
    check_integer_bounds: str = "_check_integer_bounds"
    check_float_bounds: str = "_check_float_bounds"
    check_enum: str = "_check_enum_bounds"
    parse_date: str = "_parse_date"
    convert_pure_array: str = "_convert_pure_array"

    def bounds_check(self, kind: str) -> str:
        """Return the primitive name for an "array", "integer" or "float" bounds check."""
        return {
            "array": self.check_array_bounds,
            "integer": self.check_integer_bounds,
            "float": self.check_float_bounds,
        }[kind]

    @staticmethod
    def from_dict(d: dict) -> CapabilitySet:
        capabilities = CapabilitySet()
        for k, v in d.items():
            if hasattr(capabilities, k):
                setattr(capabilities, k, v)
        return capabilities

    def to_dict(self) -> dict:
        return asdict(self)
