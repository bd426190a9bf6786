"""
Schema analyzer.

Phase 2 of the pipeline: resolve references and build one ClassDef per
definition.
"""

from __future__ import annotations

import keyword
import logging

from ...utils import wrap_text
from ..errors import GenerationError, ResolutionError, SchemaShapeError
from ..schema_ast.nodes import Definition, PropertySchema, SchemaDocument
from .constraint_compiler import ConstraintCompiler
from .enum_extractor import extract_enum_constants
from .ir_nodes import ClassDef, SetterDef
from .property_builder import PropertySpecBuilder
from .reference_resolver import ReferenceResolver
from .type_inferencer import TypeInferencer

logger = logging.getLogger(__name__)


def _accessor_names(attribute: str) -> tuple[str, str]:
    return f"get_{attribute}", f"set_{attribute}"


class SchemaAnalyzer:
    """Builds class definitions from a parsed schema document."""

    def __init__(self, document: SchemaDocument, wrap_width: int = 120):
        """
        Initialize the analyzer.

        Args:
            document: The parsed schema document
            wrap_width: Width at which descriptions are wrapped
        """
        self.document = document
        self.wrap_width = wrap_width
        self.resolver = ReferenceResolver(document)
        self.inferencer = TypeInferencer(self.resolver)
        self.property_builder = PropertySpecBuilder(self.inferencer, wrap_width)
        self.constraint_compiler = ConstraintCompiler(self.inferencer)

    def analyze_definition(self, definition: Definition) -> ClassDef:
        """
        Build the class definition of one schema definition.

        Args:
            definition: The definition to analyze

        Returns:
            The ClassDef

        Raises:
            GenerationError: If a property cannot be analyzed, with the
                definition, property and schema path attached
        """
        logger.debug("Analyzing definition %s", definition.name)
        if not definition.name.isidentifier() or keyword.iskeyword(definition.name):
            raise SchemaShapeError(
                f"Definition name {definition.name!r} is not a valid class name",
                definition=definition.name,
                schema_path=definition.source_path,
            )

        class_def = ClassDef(name=definition.name, source_path=definition.source_path)
        if definition.description:
            class_def.description_lines = wrap_text(definition.description, self.wrap_width)

        for name, schema in definition.properties.items():
            try:
                self._analyze_property(class_def, schema, definition.required)
            except GenerationError as e:
                raise e.with_context(definition=definition.name, property_name=name, schema_path=schema.source_path)

        return class_def

    def _analyze_property(self, class_def: ClassDef, schema: PropertySchema, required: set[str]) -> None:
        if self.resolver.is_reference(schema):
            self._add_reference(class_def, schema)

        field_spec = self.property_builder.build(schema, required)
        for other in class_def.fields:
            if other.attribute == field_spec.attribute:
                raise SchemaShapeError(
                    f"Properties {other.name!r} and {schema.name!r} both map to attribute {field_spec.attribute!r}"
                )
            # An instance attribute named like an accessor would shadow it
            if field_spec.attribute in _accessor_names(other.attribute) or other.attribute in _accessor_names(
                field_spec.attribute
            ):
                raise SchemaShapeError(
                    f"Attributes {other.attribute!r} and {field_spec.attribute!r} of properties {other.name!r} "
                    f"and {schema.name!r} clash with each other's accessors"
                )
        class_def.fields.append(field_spec)

        rules = self.constraint_compiler.compile(schema)
        if rules:
            class_def.setters.append(SetterDef(field=field_spec, rules=rules))

        if schema.enum is not None:
            class_def.constants.extend(extract_enum_constants(schema.name, schema.enum))

    def _add_reference(self, class_def: ClassDef, schema: PropertySchema) -> None:
        # Every reference must resolve, even when the declared type wins
        resolved = self.resolver.resolve_schema(schema)
        if resolved.name not in self.document.definitions:
            raise ResolutionError(
                self.resolver.get_reference(schema),
                reason=f"{resolved.name!r} is not a definition of this document",
                property_name=schema.name,
                schema_path=schema.source_path,
            )
        if resolved.name != class_def.name and resolved.name not in class_def.references:
            class_def.references.append(resolved.name)
