"""
Utility functions for the JSON Schema to model generator.
"""

import keyword
import re
import textwrap

_UPPER_BOUNDARY = re.compile(r"(?<!^)[A-Z]")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")


def sanitize_ambiguous_name(value: object) -> str:
    """Replace every run of non-alphanumeric characters with a single underscore.

    Examples:
        "BOL.COM" -> "BOL_COM"
        "same day - express" -> "same_day_express"
    """
    return _NON_ALPHANUMERIC.sub("_", str(value))


def to_high_snake_case(text: str) -> str:
    """Convert a property name to the UPPER_SNAKE_CASE prefix used by enum constants.

    An underscore is inserted before every upper case letter that does not
    start the string, so "distributionParty" becomes "DISTRIBUTION_PARTY".
    """
    return sanitize_ambiguous_name(_UPPER_BOUNDARY.sub(r"_\g<0>", text)).upper()


def to_snake_case(text: str) -> str:
    """Convert a schema property name to a valid Python attribute name.

    Examples:
        "onHoldByRetailer" -> "on_hold_by_retailer"
        "EANCode" -> "ean_code"
        "class" -> "class_"
        "3dModel" -> "_3d_model"
    """
    name = _CAMEL_BOUNDARY.sub("_", text)
    name = _NON_ALPHANUMERIC.sub("_", name).strip("_").lower()
    if not name:
        name = "field"
    if name[0].isdigit():
        name = f"_{name}"
    if keyword.iskeyword(name):
        name = f"{name}_"
    return name


def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap free text, keeping explicit line breaks and breaking long words."""
    lines: list[str] = []
    for paragraph in text.splitlines():
        wrapped = textwrap.wrap(paragraph, width=width, break_long_words=True, break_on_hyphens=False)
        lines.extend(wrapped or [""])
    while lines and not lines[-1]:
        lines.pop()
    return lines
