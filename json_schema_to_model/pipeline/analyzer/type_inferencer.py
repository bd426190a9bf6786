"""
Type inference for property schemas.
"""

from __future__ import annotations

from ..schema_ast.nodes import PropertySchema
from .reference_resolver import ReferenceResolver
from .type_mapper import DATE_TIME_TYPE, map_type


class TypeInferencer:
    """Determines the emitted type of a property schema.

    Two answers exist for the same schema. The strict one favours the declared
    primitive type and gives the storage type of a field ("list" for an array
    of references). The non-strict one favours the reference and gives the
    element type of such an array ("Pricing"), used for documentation and for
    the pure-array instance check.
    """

    def __init__(self, resolver: ReferenceResolver):
        self.resolver = resolver

    def infer_type(self, schema: PropertySchema, strict: bool = True) -> str | None:
        """
        Infer the type of a property.

        Args:
            schema: The property schema
            strict: Prefer the declared primitive type over the reference

        Returns:
            The Python type name, or None for an untyped property

        Raises:
            ResolutionError: If the schema's reference does not resolve
        """
        if schema.is_date_time:
            return DATE_TIME_TYPE
        if strict and schema.type is not None:
            return map_type(schema.type)
        if self.resolver.is_reference(schema):
            return map_type(self.resolver.resolve_schema(schema).name)
        return None

    def is_array(self, schema: PropertySchema) -> bool:
        return self.infer_type(schema) == map_type("array")

    def is_pure_array(self, schema: PropertySchema) -> bool:
        """Whether the property is an array whose elements are referenced instances."""
        return self.resolver.is_reference(schema) and self.is_array(schema)
