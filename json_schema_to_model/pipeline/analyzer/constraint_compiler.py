"""
Compilation of schema constraints into validation rules.
"""

from __future__ import annotations

from ..schema_ast.nodes import PropertySchema
from .ir_nodes import ArrayTypeRule, BoundsKind, BoundsRule, DateParseRule, EnumRule, ValidationRule
from .type_inferencer import TypeInferencer
from .type_mapper import DATE_TIME_TYPE, map_type


class ConstraintCompiler:
    """Turns the constraints of a property into the ordered rules of its setter.

    Rules come out in evaluation order: pure array type, array bounds, numeric
    bounds, date parsing, enum membership.
    """

    def __init__(self, inferencer: TypeInferencer):
        self.inferencer = inferencer

    def compile(self, schema: PropertySchema) -> list[ValidationRule]:
        """
        Compile the validation rules of a property.

        Args:
            schema: The property schema

        Returns:
            Ordered list of rules, empty when the setter is a plain assignment
        """
        type_name = self.inferencer.infer_type(schema)
        rules: list[ValidationRule] = []

        if self.inferencer.is_pure_array(schema):
            rules.append(ArrayTypeRule(class_name=self.inferencer.infer_type(schema, strict=False)))

        if type_name == map_type("array") and schema.has_item_bounds:
            rules.append(BoundsRule(BoundsKind.ARRAY, schema.min_items, schema.max_items))

        if schema.has_numeric_bounds:
            if type_name == map_type("integer"):
                rules.append(BoundsRule(BoundsKind.INTEGER, schema.minimum, schema.maximum))
            elif type_name == map_type("number"):
                rules.append(BoundsRule(BoundsKind.FLOAT, schema.minimum, schema.maximum))

        if type_name == DATE_TIME_TYPE:
            rules.append(DateParseRule())

        if schema.enum is not None:
            rules.append(EnumRule(values=tuple(schema.enum)))

        return rules
