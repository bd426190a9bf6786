"""
Translation of schema primitive type names to Python type names.
"""

from __future__ import annotations

TYPE_MAP: dict[str, str] = {
    "boolean": "bool",
    "string": "str",
    "number": "float",
    "integer": "int",
    "array": "list",
}

DATE_TIME_TYPE = "datetime"


def map_type(type_name: str) -> str:
    """Map a schema primitive type to its Python name.

    Names outside the primitive set (e.g. an already resolved reference name)
    are passed through unchanged.
    """
    return TYPE_MAP.get(type_name, type_name)
