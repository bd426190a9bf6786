"""
Python code generation backend.

Renders one model module per class definition from IR.
"""

from __future__ import annotations

import json
from typing import Any

from ..analyzer.ir_nodes import (
    ArrayTypeRule,
    BoundsRule,
    ClassDef,
    DateParseRule,
    EnumRule,
    FieldSpec,
    SetterDef,
    ValidationRule,
)
from ..analyzer.type_mapper import DATE_TIME_TYPE, map_type
from .base import CodeBackend


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    def render_class(self, class_def: ClassDef, generation_comment: list[str] | None = None) -> str:
        """Render a model module from a class definition."""
        prefix = self.prefix_template.render(
            generation_comment=generation_comment or [],
            import_lines=self._import_lines(class_def),
            type_checking_imports=[f"from .{name} import {name}" for name in class_def.references],
        )
        body = self.class_template.render(self._prepare_class_context(class_def))
        return prefix + "\n\n" + body

    def render_package(self, class_names: list[str], generation_comment: list[str] | None = None) -> str:
        """Render the package __init__ re-exporting every model."""
        return self.package_template.render(
            generation_comment=generation_comment or [],
            class_names=class_names,
        )

    def translate_type(self, field: FieldSpec) -> str:
        """Python annotation of a field's storage type."""
        if field.type_name is None:
            return "Any"
        if field.element_type is not None:
            result = f"{field.type_name}[{field.element_type}]"
        else:
            result = field.type_name
        if field.nullable:
            result = f"{result} | None"
        return result

    def parameter_type(self, field: FieldSpec) -> str:
        """Python annotation of a setter parameter."""
        if field.type_name == DATE_TIME_TYPE:
            # Setters accept anything the date parser understands
            return f"str | {DATE_TIME_TYPE}"
        if field.type_name is None:
            return "Any"
        if field.element_type is not None:
            return f"{field.type_name}[{field.element_type}]"
        return field.type_name

    def render_rule(self, rule: ValidationRule, field: FieldSpec) -> list[str]:
        caps = self.capabilities
        param = field.attribute

        if isinstance(rule, ArrayTypeRule):
            return [f"self.{caps.check_pure_array}({param}, {self._class_alias(rule.class_name, field)})"]

        if isinstance(rule, BoundsRule):
            minimum = self.format_literal(rule.minimum)
            maximum = self.format_literal(rule.maximum)
            return [f"self.{caps.bounds_check(rule.kind.value)}({param}, {minimum}, {maximum})"]

        if isinstance(rule, DateParseRule):
            return [f"{param} = self.{caps.parse_date}({param})"]

        if isinstance(rule, EnumRule):
            lines = [f"self.{caps.check_enum}({param}, ["]
            lines.extend(f"    {self.format_literal(value)}," for value in rule.values)
            lines.append("])")
            return lines

        raise TypeError(f"Unsupported validation rule {rule!r}")

    def format_literal(self, value: Any) -> str:
        """Format a decoded JSON value as a Python literal."""
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, list):
            return "[" + ", ".join(self.format_literal(v) for v in value) + "]"
        if isinstance(value, dict):
            items = ", ".join(f"{self.format_literal(k)}: {self.format_literal(v)}" for k, v in value.items())
            return "{" + items + "}"
        return repr(value)

    def _class_alias(self, class_name: str, field: FieldSpec) -> str:
        # The setter parameter would shadow a class imported under the same name
        return f"_{class_name}" if class_name == field.attribute else class_name

    def _import_lines(self, class_def: ClassDef) -> list[str]:
        typing_names = ["Any", "ClassVar", "final"]
        if class_def.references:
            typing_names.insert(0, "TYPE_CHECKING")

        lines = []
        if any(f.type_name == DATE_TIME_TYPE for f in class_def.fields):
            lines.append("from datetime import datetime")
        lines.append(f"from typing import {', '.join(typing_names)}")
        lines.append("")
        lines.append(f"from {self.capabilities.module} import {self.capabilities.class_name}")
        return lines

    def _prepare_class_context(self, class_def: ClassDef) -> dict[str, Any]:
        """
        Prepare the template context for a class.

        Args:
            class_def: The class definition

        Returns:
            Dictionary of template variables
        """
        return {
            "CLASS_NAME": class_def.name,
            "BASE_CLASS": self.capabilities.class_name,
            "docstring": self._docstring_lines(class_def),
            "constants": [
                {"name": constant.name, "value": self.format_literal(constant.value)} for constant in class_def.constants
            ],
            "fields": [self._prepare_field_context(field) for field in class_def.fields],
            "setters": [self._prepare_setter_context(setter) for setter in class_def.setters],
        }

    def _prepare_field_context(self, field: FieldSpec) -> dict[str, Any]:
        comment = list(field.description_lines)
        if field.doc_type is not None:
            comment.append(f":type: {field.doc_type}")

        getter = f"self.get_{field.attribute}()"
        if field.type_name == map_type("array"):
            getter = f"self.{self.capabilities.convert_pure_array}({getter})"

        default = self.format_literal(field.default)
        if field.type_name == DATE_TIME_TYPE and field.default is not None:
            default = f"self.{self.capabilities.parse_date}({default})"

        return {
            "attribute": field.attribute,
            "attribute_literal": self.format_literal(field.attribute),
            "name_literal": self.format_literal(field.name),
            "annotation": self.translate_type(field),
            "comment": comment,
            "initialized": field.initialized,
            "default": default,
            "export": getter,
        }

    def _prepare_setter_context(self, setter: SetterDef) -> dict[str, Any]:
        field = setter.field
        imports = []
        body: list[str] = []
        for rule in setter.rules:
            if isinstance(rule, ArrayTypeRule):
                alias = self._class_alias(rule.class_name, field)
                statement = f"from .{rule.class_name} import {rule.class_name}"
                if alias != rule.class_name:
                    statement += f" as {alias}"
                imports.append(statement)
            body.extend(self.render_rule(rule, field))
        return {
            "attribute": field.attribute,
            "parameter_type": self.parameter_type(field),
            "imports": imports,
            "body": body,
        }

    def _docstring_lines(self, class_def: ClassDef) -> list[str]:
        lines = [self._escape_docstring(line) for line in class_def.description_lines]
        if lines:
            lines.append("")
        lines.append("Accessors:")
        for field in class_def.fields:
            lines.append(f"    get_{field.attribute}() -> {self.translate_type(field)}")
            lines.append(f"    set_{field.attribute}({field.attribute}: {self.parameter_type(field)}) -> {class_def.name}")
        return lines

    @staticmethod
    def _escape_docstring(line: str) -> str:
        return line.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
