"""
Generation-time errors.

These describe a malformed schema or a failed emission. They are distinct
from the validation errors raised by generated accessors at runtime, which
live in :mod:`json_schema_to_model.runtime.errors`.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for errors that abort the generation of a definition.

    Attributes:
        definition: Name of the definition being generated, if known
        property_name: Name of the property being processed, if known
        schema_path: Location in the schema document (e.g. "#/definitions/Offer/properties/ean")
    """

    def __init__(
        self,
        message: str,
        definition: str | None = None,
        property_name: str | None = None,
        schema_path: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.definition = definition
        self.property_name = property_name
        self.schema_path = schema_path

    def with_context(
        self,
        definition: str | None = None,
        property_name: str | None = None,
        schema_path: str | None = None,
    ) -> GenerationError:
        """Fill in missing context, keeping whatever was already known."""
        self.definition = self.definition or definition
        self.property_name = self.property_name or property_name
        self.schema_path = self.schema_path or schema_path
        return self

    def __str__(self) -> str:
        context = []
        if self.definition:
            context.append(f"definition={self.definition}")
        if self.property_name:
            context.append(f"property={self.property_name}")
        if self.schema_path:
            context.append(f"path={self.schema_path}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class ResolutionError(GenerationError):
    """Raised when a $ref pointer does not resolve within the schema document."""

    def __init__(self, pointer: str, missing_segment: str | None = None, reason: str | None = None, **context):
        message = f"Cannot resolve reference {pointer!r}"
        if reason is not None:
            message += f": {reason}"
        elif missing_segment is not None:
            message += f": segment {missing_segment!r} not found"
        super().__init__(message, **context)
        self.pointer = pointer
        self.missing_segment = missing_segment


class SchemaShapeError(GenerationError):
    """Raised when the schema document is structurally malformed.

    Untyped properties (no type, no reference, no date-time format) are legal
    and never raise this error.
    """

    pass


class EmissionError(GenerationError):
    """Raised when generated code cannot be validated or written."""

    pass
