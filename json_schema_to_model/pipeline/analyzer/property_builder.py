"""
Field specification builder.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ...utils import to_snake_case, wrap_text
from ..errors import SchemaShapeError
from ..schema_ast.nodes import PropertySchema
from .ir_nodes import FieldSpec
from .type_inferencer import TypeInferencer

# Attribute names that would clash with the setter signature or the model API
RESERVED_ATTRIBUTES = {"self", "to_dict"}


def attribute_name(property_name: str) -> str:
    """Python attribute name of a schema property."""
    attribute = to_snake_case(property_name)
    if attribute in RESERVED_ATTRIBUTES:
        attribute = f"{attribute}_"
    return attribute


class PropertySpecBuilder:
    """Decides type, nullability, default and documentation of one field."""

    def __init__(self, inferencer: TypeInferencer, wrap_width: int = 120):
        self.inferencer = inferencer
        self.wrap_width = wrap_width

    def build(self, schema: PropertySchema, required: set[str]) -> FieldSpec:
        """
        Build the field specification of a property.

        Arrays and non-required properties are initialized: arrays with an
        empty list, anything else with the declared default or None, nullable
        unless a default is declared. A date-time default must be an ISO 8601
        string. Required non-array properties are left uninitialized and
        non-nullable.

        Args:
            schema: The property schema
            required: Required property names of the owning definition

        Returns:
            The FieldSpec

        Raises:
            SchemaShapeError: If a date-time default does not parse
        """
        type_name = self.inferencer.infer_type(schema)
        is_array = self.inferencer.is_array(schema)
        is_pure_array = self.inferencer.is_pure_array(schema)

        spec = FieldSpec(
            name=schema.name,
            attribute=attribute_name(schema.name),
            type_name=type_name,
            is_array=is_array,
        )

        if is_pure_array:
            spec.element_type = self.inferencer.infer_type(schema, strict=False)

        if schema.name not in required or is_array:
            spec.initialized = True
            if is_array:
                spec.default = []
            else:
                spec.default = schema.default if schema.has_default else None
                if schema.is_date_time and spec.default is not None:
                    _check_date_default(spec.default)
                spec.nullable = not schema.has_default

        if schema.description:
            spec.description_lines = wrap_text(schema.description, self.wrap_width)

        if schema.type is not None:
            if self.inferencer.resolver.is_reference(schema):
                spec.doc_type = f"list[{self.inferencer.infer_type(schema, strict=False)}]"
            else:
                spec.doc_type = type_name

        return spec


def _check_date_default(value: Any) -> None:
    # The generated __init__ parses the same value with the runtime date parser
    if not isinstance(value, str):
        raise SchemaShapeError(f"date-time default must be a string, got {value!r}")
    try:
        datetime.fromisoformat(value)
    except ValueError as e:
        raise SchemaShapeError(f"date-time default {value!r} is not a valid date-time") from e
