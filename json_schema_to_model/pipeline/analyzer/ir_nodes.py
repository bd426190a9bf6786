"""
IR (Intermediate Representation) node definitions.

These nodes describe one model class, ready for rendering. All references
are resolved and every validation constraint is expressed as a tagged rule,
so what gets checked is decided here and how it is rendered is left to the
backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class BoundsKind(str, Enum):
    """What a bounds rule measures."""

    ARRAY = "array"  # array length
    INTEGER = "integer"
    FLOAT = "float"


@dataclass(frozen=True)
class ValidationRule:
    """Base class for all validation rules attached to a setter."""


@dataclass(frozen=True)
class ArrayTypeRule(ValidationRule):
    """Every element of the array must be an instance of ``class_name``."""

    class_name: str


@dataclass(frozen=True)
class BoundsRule(ValidationRule):
    """The value (or array length) must lie within [minimum, maximum]; None is unbounded."""

    kind: BoundsKind
    minimum: Any = None
    maximum: Any = None


@dataclass(frozen=True)
class DateParseRule(ValidationRule):
    """The incoming value is replaced by its parsed datetime."""


@dataclass(frozen=True)
class EnumRule(ValidationRule):
    """The value must be one of ``values``."""

    values: tuple[Any, ...]


@dataclass
class FieldSpec:
    """A field of a generated class."""

    name: str = ""  # Schema property name
    attribute: str = ""  # Python attribute name
    type_name: str | None = None  # Storage type, None when untyped
    doc_type: str | None = None  # Type shown in the documentation line
    element_type: str | None = None  # Referenced element type of a pure array
    nullable: bool = False
    initialized: bool = False
    default: Any = None
    description_lines: list[str] = field(default_factory=list)
    is_array: bool = False


@dataclass(frozen=True)
class EnumConstant:
    """A class-scoped constant derived from an enum value."""

    name: str
    value: Any


@dataclass
class SetterDef:
    """A generated setter: the ordered rules applied before assignment."""

    field: FieldSpec
    rules: list[ValidationRule] = field(default_factory=list)


@dataclass
class ClassDef:
    """A model class definition."""

    name: str = ""
    source_path: str = ""
    description_lines: list[str] = field(default_factory=list)

    fields: list[FieldSpec] = field(default_factory=list)

    # Only properties with at least one rule get an explicit setter
    setters: list[SetterDef] = field(default_factory=list)

    constants: list[EnumConstant] = field(default_factory=list)

    # Other generated classes this class refers to, in first-use order
    references: list[str] = field(default_factory=list)
