import pytest

from json_schema_to_model.pipeline.analyzer import EnumConstant, extract_enum_constants
from json_schema_to_model.utils import sanitize_ambiguous_name, to_high_snake_case, to_snake_case, wrap_text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("color", "COLOR"),
        ("distributionParty", "DISTRIBUTION_PARTY"),
        ("onHoldByRetailer", "ON_HOLD_BY_RETAILER"),
        ("delivery-code", "DELIVERY_CODE"),
    ],
)
def test_to_high_snake_case(text, expected):
    assert to_high_snake_case(text) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("BOL", "BOL"),
        ("BOL.COM", "BOL_COM"),
        ("same day -- express", "same_day_express"),
        (12, "12"),
    ],
)
def test_sanitize_ambiguous_name(value, expected):
    assert sanitize_ambiguous_name(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ean", "ean"),
        ("onHoldByRetailer", "on_hold_by_retailer"),
        ("EANCode", "ean_code"),
        ("delivery-code", "delivery_code"),
        ("3dModel", "_3d_model"),
        ("class", "class_"),
    ],
)
def test_to_snake_case(text, expected):
    assert to_snake_case(text) == expected


def test_wrap_text_keeps_line_breaks():
    assert wrap_text("first line\nsecond line", 120) == ["first line", "second line"]


def test_wrap_text_breaks_long_words():
    assert wrap_text("a" * 25, 10) == ["a" * 10, "a" * 10, "a" * 5]


def test_enum_constants_keep_order_and_duplicates():
    constants = extract_enum_constants("color", ["A", "B", "A"])
    assert constants == [
        EnumConstant("COLOR_A", "A"),
        EnumConstant("COLOR_B", "B"),
        EnumConstant("COLOR_A", "A"),
    ]


def test_enum_constants_sanitize_values():
    constants = extract_enum_constants("distributionParty", ["BOL.COM", "same day"])
    assert [c.name for c in constants] == ["DISTRIBUTION_PARTY_BOL_COM", "DISTRIBUTION_PARTY_same_day"]
    assert [c.value for c in constants] == ["BOL.COM", "same day"]


def test_enum_constants_prefix_starting_with_digit():
    constants = extract_enum_constants("3dFormat", ["GLB", "USDZ"])
    assert [c.name for c in constants] == ["_3D_FORMAT_GLB", "_3D_FORMAT_USDZ"]
    assert all(c.name.isidentifier() for c in constants)


def test_property_starting_with_digit_generates(generated_package):
    schema = {"definitions": {"Media": {"properties": {"3dFormat": {"type": "string", "enum": ["GLB", "USDZ"]}}}}}
    media = generated_package(schema).Media()
    assert media.set__3d_format(media._3D_FORMAT_USDZ).get__3d_format() == "USDZ"
