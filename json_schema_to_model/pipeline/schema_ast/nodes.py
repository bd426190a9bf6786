"""
Node definitions for the parsed schema document.

Property schemas are structured records with explicit optional fields, so
presence tests are ``is not None`` checks instead of key lookups on raw dicts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import SchemaShapeError


@dataclass
class PropertySchema:
    """The schema of one property of a definition."""

    name: str = ""

    type: str | None = None  # "boolean", "string", "number", "integer", "array", ...
    format: str | None = None  # only "date-time" is meaningful

    ref: str | None = None  # direct $ref
    items_ref: str | None = None  # items.$ref (array of references)

    enum: list[Any] | None = None

    minimum: float | None = None
    maximum: float | None = None
    min_items: int | None = None
    max_items: int | None = None

    default: Any = None
    has_default: bool = False

    description: str | None = None

    # Location in the schema document (for error messages)
    source_path: str = ""

    @property
    def is_date_time(self) -> bool:
        return self.format == "date-time"

    @property
    def has_numeric_bounds(self) -> bool:
        return self.minimum is not None or self.maximum is not None

    @property
    def has_item_bounds(self) -> bool:
        return self.min_items is not None or self.max_items is not None


@dataclass
class Definition:
    """One named, emittable entry of the document's definitions map."""

    name: str = ""
    properties: dict[str, PropertySchema] = field(default_factory=dict)
    required: set[str] = field(default_factory=set)
    description: str | None = None
    source_path: str = ""


@dataclass
class SchemaDocument:
    """The decoded schema document.

    ``raw`` is the untouched JSON document, walked by the reference resolver;
    ``definitions`` holds the parsed definitions in document order and
    ``invalid`` the definitions that could not be parsed.
    """

    raw: dict[str, Any] = field(default_factory=dict)
    definitions: dict[str, Definition] = field(default_factory=dict)
    invalid: dict[str, SchemaShapeError] = field(default_factory=dict)
