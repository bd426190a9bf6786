"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import ClassDef, FieldSpec, ValidationRule
from ..capabilities import CapabilitySet
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    @property
    def capabilities(self) -> CapabilitySet:
        return self.config.base

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")
        self.package_template = self.jinja_env.get_template(f"package.{self.FILE_EXTENSION}.jinja2")

    def file_name(self, class_name: str) -> str:
        """Name of the file a class is written to."""
        return f"{class_name}.{self.FILE_EXTENSION}"

    @abstractmethod
    def render_class(self, class_def: ClassDef, generation_comment: list[str] | None = None) -> str:
        """
        Render one class definition as a complete source file.

        Args:
            class_def: The class definition
            generation_comment: Header lines to put at the top of the file

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def render_package(self, class_names: list[str], generation_comment: list[str] | None = None) -> str:
        """
        Render the file that exposes every generated class of an output directory.

        Args:
            class_names: Names of the generated classes, in generation order
            generation_comment: Header lines to put at the top of the file

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def render_rule(self, rule: ValidationRule, field: FieldSpec) -> list[str]:
        """
        Render one validation rule as statements of the field's setter.

        Args:
            rule: The validation rule
            field: The field the setter assigns

        Returns:
            Lines of code, without indentation
        """

    @abstractmethod
    def format_literal(self, value: Any) -> str:
        """
        Format a JSON value as a literal of the target language.

        Args:
            value: The decoded JSON value

        Returns:
            Literal source text
        """
