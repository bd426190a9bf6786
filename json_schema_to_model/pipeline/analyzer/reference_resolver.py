"""
Reference resolver for $ref resolution.

Resolves $ref pointers by walking the schema document from its root.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import ResolutionError
from ..schema_ast.nodes import PropertySchema, SchemaDocument


@dataclass(frozen=True)
class ResolvedRef:
    """A resolved $ref."""

    name: str  # Final pointer segment, used as the emitted type name
    body: Any  # The raw definition found at the pointer


class ReferenceResolver:
    """Resolves $ref pointers to definitions of a schema document."""

    def __init__(self, document: SchemaDocument):
        """
        Initialize the resolver.

        Args:
            document: The parsed schema document; only its raw form is walked
        """
        self.document = document
        self._cache: dict[str, ResolvedRef] = {}

    @staticmethod
    def is_reference(schema: PropertySchema) -> bool:
        """Whether the schema is a reference or an array of references."""
        return schema.ref is not None or schema.items_ref is not None

    @staticmethod
    def get_reference(schema: PropertySchema) -> str:
        """Return the $ref of a schema, preferring the direct form over items.$ref."""
        if schema.ref is not None:
            return schema.ref
        if schema.items_ref is not None:
            return schema.items_ref
        raise ValueError(f"Schema {schema.source_path or schema.name!r} is not a reference")

    def resolve(self, pointer: str) -> ResolvedRef:
        """
        Resolve a pointer such as "#/definitions/Pricing".

        The pointer is split on "/", a leading "#" segment is dropped and the
        remaining segments are followed as keys from the document root.

        Args:
            pointer: The $ref string

        Returns:
            ResolvedRef with the final segment name and the definition body

        Raises:
            ResolutionError: If a segment is absent from the document
        """
        cached = self._cache.get(pointer)
        if cached is not None:
            return cached

        parts = pointer.split("/")
        if parts and parts[0] == "#":
            parts = parts[1:]
        parts = [part.replace("~1", "/").replace("~0", "~") for part in parts]
        if not parts or not parts[-1]:
            raise ResolutionError(pointer)

        node: Any = self.document.raw
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                raise ResolutionError(pointer, missing_segment=part)
            node = node[part]

        resolved = ResolvedRef(name=parts[-1], body=node)
        self._cache[pointer] = resolved
        return resolved

    def resolve_schema(self, schema: PropertySchema) -> ResolvedRef:
        """Resolve the reference carried by a property schema."""
        try:
            return self.resolve(self.get_reference(schema))
        except ResolutionError as e:
            raise e.with_context(property_name=schema.name, schema_path=schema.source_path)
