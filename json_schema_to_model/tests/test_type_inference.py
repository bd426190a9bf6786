"""
Unit tests for type mapping and type inference.
"""

import pytest

from json_schema_to_model.pipeline.analyzer import ReferenceResolver, TypeInferencer, map_type
from json_schema_to_model.pipeline.errors import ResolutionError
from json_schema_to_model.pipeline.schema_ast import PropertySchema, SchemaParser

SCHEMA = {
    "definitions": {
        "Pricing": {"type": "object", "properties": {}},
    },
}


@pytest.fixture
def inferencer():
    return TypeInferencer(ReferenceResolver(SchemaParser().parse(SCHEMA)))


@pytest.mark.parametrize(
    "schema_type, expected",
    [
        ("boolean", "bool"),
        ("string", "str"),
        ("number", "float"),
        ("integer", "int"),
        ("array", "list"),
        ("Pricing", "Pricing"),
        ("object", "object"),
    ],
)
def test_map_type(schema_type, expected):
    assert map_type(schema_type) == expected


def test_date_time_wins_over_everything(inferencer):
    schema = PropertySchema(type="string", format="date-time", ref="#/definitions/Pricing")
    assert inferencer.infer_type(schema) == "datetime"
    assert inferencer.infer_type(schema, strict=False) == "datetime"


def test_strict_prefers_primitive(inferencer):
    schema = PropertySchema(type="array", items_ref="#/definitions/Pricing")
    assert inferencer.infer_type(schema) == "list"


def test_non_strict_prefers_reference(inferencer):
    schema = PropertySchema(type="array", items_ref="#/definitions/Pricing")
    assert inferencer.infer_type(schema, strict=False) == "Pricing"


def test_scalar_reference(inferencer):
    schema = PropertySchema(ref="#/definitions/Pricing")
    assert inferencer.infer_type(schema) == "Pricing"
    assert inferencer.infer_type(schema, strict=False) == "Pricing"


def test_non_strict_primitive_is_untyped(inferencer):
    assert inferencer.infer_type(PropertySchema(type="string"), strict=False) is None


def test_untyped(inferencer):
    assert inferencer.infer_type(PropertySchema(description="anything goes")) is None


def test_unresolvable_reference(inferencer):
    with pytest.raises(ResolutionError):
        inferencer.infer_type(PropertySchema(ref="#/definitions/Missing"))


def test_pure_array(inferencer):
    assert inferencer.is_pure_array(PropertySchema(type="array", items_ref="#/definitions/Pricing"))
    assert not inferencer.is_pure_array(PropertySchema(type="array"))
    assert not inferencer.is_pure_array(PropertySchema(ref="#/definitions/Pricing"))
