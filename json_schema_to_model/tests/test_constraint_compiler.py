"""
Unit tests for constraint compilation into validation rules.
"""

import unittest

from json_schema_to_model.pipeline.analyzer import (
    ArrayTypeRule,
    BoundsKind,
    BoundsRule,
    ConstraintCompiler,
    DateParseRule,
    EnumRule,
    ReferenceResolver,
    TypeInferencer,
)
from json_schema_to_model.pipeline.schema_ast import PropertySchema, SchemaParser

SCHEMA = {
    "definitions": {
        "Pricing": {"type": "object", "properties": {}},
    },
}


class TestConstraintCompiler(unittest.TestCase):
    def setUp(self):
        inferencer = TypeInferencer(ReferenceResolver(SchemaParser().parse(SCHEMA)))
        self.compiler = ConstraintCompiler(inferencer)

    def test_plain_property_has_no_rules(self):
        self.assertEqual(self.compiler.compile(PropertySchema(name="ean", type="string")), [])

    def test_array_without_bounds_has_no_bounds_rule(self):
        rules = self.compiler.compile(PropertySchema(name="tags", type="array"))
        self.assertFalse(any(isinstance(rule, BoundsRule) for rule in rules))

    def test_array_with_both_bounds(self):
        rules = self.compiler.compile(PropertySchema(name="tags", type="array", min_items=1, max_items=4))
        self.assertEqual(rules, [BoundsRule(BoundsKind.ARRAY, 1, 4)])

    def test_array_with_one_bound(self):
        rules = self.compiler.compile(PropertySchema(name="tags", type="array", max_items=4))
        self.assertEqual(rules, [BoundsRule(BoundsKind.ARRAY, None, 4)])

    def test_pure_array_check_comes_first(self):
        schema = PropertySchema(name="prices", type="array", items_ref="#/definitions/Pricing", min_items=1)
        rules = self.compiler.compile(schema)
        self.assertEqual(rules, [ArrayTypeRule("Pricing"), BoundsRule(BoundsKind.ARRAY, 1, None)])

    def test_integer_bounds(self):
        rules = self.compiler.compile(PropertySchema(name="qty", type="integer", minimum=1, maximum=10))
        self.assertEqual(rules, [BoundsRule(BoundsKind.INTEGER, 1, 10)])

    def test_float_bounds(self):
        rules = self.compiler.compile(PropertySchema(name="price", type="number", minimum=0.5))
        self.assertEqual(rules, [BoundsRule(BoundsKind.FLOAT, 0.5, None)])

    def test_numeric_bounds_ignored_on_strings(self):
        self.assertEqual(self.compiler.compile(PropertySchema(name="code", type="string", minimum=1)), [])

    def test_item_bounds_ignored_on_scalars(self):
        self.assertEqual(self.compiler.compile(PropertySchema(name="qty", type="integer", min_items=1)), [])

    def test_date_time(self):
        rules = self.compiler.compile(PropertySchema(name="createdAt", type="string", format="date-time"))
        self.assertEqual(rules, [DateParseRule()])

    def test_enum_is_last(self):
        schema = PropertySchema(name="createdAt", type="string", format="date-time", enum=["2020-01-01T00:00:00"])
        rules = self.compiler.compile(schema)
        self.assertEqual(rules, [DateParseRule(), EnumRule(("2020-01-01T00:00:00",))])

    def test_enum_with_bounds(self):
        schema = PropertySchema(name="level", type="integer", minimum=1, maximum=3, enum=[1, 2, 3])
        rules = self.compiler.compile(schema)
        self.assertIsInstance(rules[0], BoundsRule)
        self.assertEqual(rules[-1], EnumRule((1, 2, 3)))

    def test_untyped_enum(self):
        rules = self.compiler.compile(PropertySchema(name="kind", enum=["A", "B"]))
        self.assertEqual(rules, [EnumRule(("A", "B"))])
