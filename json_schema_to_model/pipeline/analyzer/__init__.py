"""
Analyzer module.

Contains type mapping, reference resolution, type inference and the
per-property builders that produce the IR.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .constraint_compiler import ConstraintCompiler
from .enum_extractor import extract_enum_constants
from .ir_nodes import (
    ArrayTypeRule,
    BoundsKind,
    BoundsRule,
    ClassDef,
    DateParseRule,
    EnumConstant,
    EnumRule,
    FieldSpec,
    SetterDef,
    ValidationRule,
)
from .property_builder import PropertySpecBuilder
from .reference_resolver import ReferenceResolver, ResolvedRef
from .type_inferencer import TypeInferencer
from .type_mapper import TYPE_MAP, map_type

__all__ = [
    "SchemaAnalyzer",
    "ConstraintCompiler",
    "PropertySpecBuilder",
    "ReferenceResolver",
    "ResolvedRef",
    "TypeInferencer",
    "TYPE_MAP",
    "map_type",
    "extract_enum_constants",
    "ArrayTypeRule",
    "BoundsKind",
    "BoundsRule",
    "ClassDef",
    "DateParseRule",
    "EnumConstant",
    "EnumRule",
    "FieldSpec",
    "SetterDef",
    "ValidationRule",
]
