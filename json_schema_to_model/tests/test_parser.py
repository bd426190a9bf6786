"""
Unit tests for the schema parser.
"""

import pytest

from json_schema_to_model.pipeline.errors import SchemaShapeError
from json_schema_to_model.pipeline.schema_ast import SchemaParser


@pytest.fixture
def parser():
    return SchemaParser()


def test_parse_definitions_in_order(parser, offers_schema):
    document = parser.parse(offers_schema)
    assert list(document.definitions) == [
        "CreateOfferRequest",
        "Condition",
        "Pricing",
        "BundlePrice",
        "StockCreate",
        "Fulfilment",
        "OrderFulfilment",
    ]
    assert document.invalid == {}


def test_comment_entries_are_skipped(parser):
    document = parser.parse(
        {
            "definitions": {
                "_comment": "not a definition",
                "_comment_models": {"type": "object"},
                "Offer": {"type": "object", "properties": {}},
            }
        }
    )
    assert list(document.definitions) == ["Offer"]


def test_property_fields(parser, offers_schema):
    document = parser.parse(offers_schema)

    pricing = document.definitions["Pricing"]
    assert pricing.required == {"bundlePrices"}
    prices = pricing.properties["bundlePrices"]
    assert prices.type == "array"
    assert prices.items_ref == "#/definitions/BundlePrice"
    assert prices.min_items == 1
    assert prices.max_items == 4
    assert prices.source_path == "#/definitions/Pricing/properties/bundlePrices"

    method = document.definitions["Fulfilment"].properties["method"]
    assert method.enum == ["FBR", "FBB"]
    assert method.has_default
    assert method.default == "FBR"

    delivery = document.definitions["OrderFulfilment"].properties["latestDeliveryDate"]
    assert delivery.is_date_time


def test_falsy_default_is_kept(parser, offers_schema):
    managed = parser.parse(offers_schema).definitions["StockCreate"].properties["managedByRetailer"]
    assert managed.has_default
    assert managed.default is False


def test_missing_default(parser, offers_schema):
    amount = parser.parse(offers_schema).definitions["StockCreate"].properties["amount"]
    assert not amount.has_default
    assert amount.minimum == 0
    assert amount.maximum == 999


def test_nullable_type_union(parser):
    document = parser.parse(
        {"definitions": {"Offer": {"properties": {"reference": {"type": ["string", "null"]}}}}}
    )
    assert document.definitions["Offer"].properties["reference"].type == "string"


def test_untyped_property_is_legal(parser):
    document = parser.parse({"definitions": {"Offer": {"properties": {"payload": {}}}}})
    payload = document.definitions["Offer"].properties["payload"]
    assert payload.type is None
    assert payload.ref is None


@pytest.mark.parametrize("schema", [[], {"info": {}}, {"definitions": []}])
def test_malformed_document(parser, schema):
    with pytest.raises(SchemaShapeError):
        parser.parse(schema)


@pytest.mark.parametrize(
    "body",
    [
        ["not", "an", "object"],
        {"properties": []},
        {"properties": {}, "required": "ean"},
        {"properties": {"ean": "string"}},
        {"properties": {"qty": {"type": "integer", "minimum": "1"}}},
        {"properties": {"qty": {"type": "integer", "maximum": True}}},
        {"properties": {"color": {"type": "string", "enum": "RED"}}},
        {"properties": {"pricing": {"$ref": 12}}},
        {"description": 5, "properties": {}},
        {"properties": {"ean": {"type": "string", "description": 12}}},
    ],
)
def test_malformed_definition_is_recorded(parser, body):
    document = parser.parse({"definitions": {"Broken": body, "Offer": {"properties": {}}}})
    assert list(document.definitions) == ["Offer"]
    assert document.invalid["Broken"].definition == "Broken"


def test_malformed_property_context(parser):
    document = parser.parse({"definitions": {"Offer": {"properties": {"qty": {"minimum": "low"}}}}})
    error = document.invalid["Offer"]
    assert error.property_name == "qty"
    assert error.schema_path == "#/definitions/Offer/properties/qty"
