"""
Enum constant extraction.
"""

from __future__ import annotations

from typing import Any

from ...utils import sanitize_ambiguous_name, to_high_snake_case
from .ir_nodes import EnumConstant


def extract_enum_constants(property_name: str, values: list[Any]) -> list[EnumConstant]:
    """Turn an enum list into class-scoped constants.

    Values keep their schema order and duplicates are emitted again, so
    ``color`` with ``["A", "B", "A"]`` yields COLOR_A, COLOR_B, COLOR_A.
    A prefix starting with a digit gets a leading underscore (``_3D_FORMAT``).
    """
    prefix = to_high_snake_case(property_name)
    if prefix[:1].isdigit():
        prefix = f"_{prefix}"
    return [EnumConstant(name=f"{prefix}_{sanitize_ambiguous_name(value)}", value=value) for value in values]
