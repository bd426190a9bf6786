"""
JSON Schema parser.

Phase 1 of the pipeline: turn the decoded JSON document into structured
definitions without resolving references.
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaShapeError
from .nodes import Definition, PropertySchema, SchemaDocument


class SchemaParser:
    """Parses a decoded schema document into a SchemaDocument."""

    def parse(self, schema: Any) -> SchemaDocument:
        """
        Parse a decoded JSON schema.

        A malformed definition does not abort parsing; it is recorded in
        ``SchemaDocument.invalid`` so the generator can report it and carry
        on with the other definitions.

        Args:
            schema: The decoded JSON document

        Returns:
            SchemaDocument with parsed definitions in document order

        Raises:
            SchemaShapeError: If the document has no definitions mapping
        """
        if not isinstance(schema, dict):
            raise SchemaShapeError("Schema document must be a JSON object", schema_path="#")

        definitions = schema.get("definitions")
        if not isinstance(definitions, dict):
            raise SchemaShapeError("Schema document has no 'definitions' object", schema_path="#/definitions")

        document = SchemaDocument(raw=schema)
        for name, body in definitions.items():
            # Skip comment fields (strings) and _comment prefixed keys
            if isinstance(body, str) or name.startswith("_comment"):
                continue
            try:
                document.definitions[name] = self.parse_definition(name, body)
            except SchemaShapeError as e:
                document.invalid[name] = e.with_context(definition=name)
        return document

    def parse_definition(self, name: str, body: Any) -> Definition:
        """Parse one entry of the definitions map."""
        path = f"#/definitions/{name}"
        if not isinstance(body, dict):
            raise SchemaShapeError("Definition must be a JSON object", definition=name, schema_path=path)

        properties = body.get("properties", {})
        if not isinstance(properties, dict):
            raise SchemaShapeError("'properties' must be a JSON object", definition=name, schema_path=f"{path}/properties")

        required = body.get("required", [])
        if not isinstance(required, list) or not all(isinstance(r, str) for r in required):
            raise SchemaShapeError("'required' must be a list of property names", definition=name, schema_path=f"{path}/required")

        definition = Definition(
            name=name,
            required=set(required),
            description=self._parse_description(body.get("description")),
            source_path=path,
        )
        for prop_name, prop_schema in properties.items():
            prop_path = f"{path}/properties/{prop_name}"
            try:
                definition.properties[prop_name] = self.parse_property(prop_name, prop_schema, prop_path)
            except SchemaShapeError as e:
                raise e.with_context(definition=name, property_name=prop_name, schema_path=prop_path)
        return definition

    def parse_property(self, name: str, schema: Any, path: str) -> PropertySchema:
        """Parse the schema of one property."""
        if not isinstance(schema, dict):
            raise SchemaShapeError("Property schema must be a JSON object")

        prop = PropertySchema(
            name=name,
            type=self._parse_type(schema.get("type")),
            format=schema.get("format"),
            ref=self._parse_ref(schema.get("$ref")),
            minimum=self._parse_number(schema, "minimum"),
            maximum=self._parse_number(schema, "maximum"),
            min_items=self._parse_number(schema, "minItems"),
            max_items=self._parse_number(schema, "maxItems"),
            description=self._parse_description(schema.get("description")),
            source_path=path,
        )

        items = schema.get("items")
        if isinstance(items, dict):
            prop.items_ref = self._parse_ref(items.get("$ref"))

        if "enum" in schema:
            if not isinstance(schema["enum"], list):
                raise SchemaShapeError("'enum' must be a list")
            prop.enum = list(schema["enum"])

        if "default" in schema:
            prop.default = schema["default"]
            prop.has_default = True

        return prop

    def _parse_type(self, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        # ["string", "null"] style unions collapse to their first non-null member
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            non_null = [v for v in value if v != "null"]
            return non_null[0] if non_null else None
        raise SchemaShapeError(f"Unsupported 'type' value {value!r}")

    def _parse_ref(self, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        raise SchemaShapeError(f"'$ref' must be a string, got {value!r}")

    def _parse_description(self, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        raise SchemaShapeError(f"'description' must be a string, got {value!r}")

    def _parse_number(self, schema: dict[str, Any], key: str) -> Any:
        value = schema.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SchemaShapeError(f"'{key}' must be a number, got {value!r}")
        return value
