"""
Schema AST module.

Contains the structured schema nodes and the parser that builds them.
"""

from __future__ import annotations

from .nodes import Definition, PropertySchema, SchemaDocument
from .parser import SchemaParser

__all__ = [
    "Definition",
    "PropertySchema",
    "SchemaDocument",
    "SchemaParser",
]
