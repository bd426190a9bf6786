"""
Pipeline generator.

Runs the phases for every definition of a schema document:

1. Parser: decode the document into structured definitions
2. Analyzer: resolve references and build one ClassDef per definition
3. Backend: render each ClassDef through the jinja2 templates
4. Formatter: optional black pass
5. Writer: validate and atomically write one file per definition
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .. import __version__
from .analyzer import SchemaAnalyzer
from .backends import PythonBackend
from .config import CodeGeneratorConfig, OutputMode
from .errors import GenerationError
from .formatters import create_formatter
from .schema_ast import SchemaParser
from .writer import AtomicWriter

logger = logging.getLogger(__name__)

PACKAGE_INIT = "__init__.py"


@dataclass
class GenerationResult:
    """Outcome of a generation run.

    Attributes:
        files: Generated file name -> source, in generation order
        classes: Names of the classes generated successfully
        failures: Errors of the definitions that could not be generated
    """

    files: dict[str, str] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    failures: list[GenerationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class PipelineGenerator:
    """Generates one model module per definition of a schema document."""

    def __init__(
        self,
        schema: dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        generation_comment: list[str] | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: The decoded JSON schema document
            config: Generation options
            generation_comment: Header lines written at the top of each file
        """
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.generation_comment = generation_comment if self.config.add_generation_comment else None
        self.backend = PythonBackend(self.config)
        self.formatter = create_formatter(self.config.formatter)
        self.writer = AtomicWriter()

    def generate(self) -> GenerationResult:
        """
        Generate the source of every definition.

        A failing definition is recorded in the result and produces no file.
        With ``fail_fast`` the first failure is raised instead.

        Returns:
            GenerationResult with the generated sources and the failures

        Raises:
            SchemaShapeError: If the document itself is malformed
            GenerationError: On the first failure when ``fail_fast`` is set
        """
        document = SchemaParser().parse(self.schema)
        analyzer = SchemaAnalyzer(document, wrap_width=self.config.wrap_width)
        result = GenerationResult()

        for name in self.schema["definitions"]:
            if name in self.config.ignore_classes:
                logger.debug("Ignoring definition %s", name)
                continue

            try:
                if name in document.invalid:
                    raise document.invalid[name]
                if name not in document.definitions:
                    # Comment entries
                    continue
                source = self._generate_class(analyzer, name)
            except GenerationError as e:
                if self.config.fail_fast:
                    raise
                logger.error("Failed to generate %s: %s", name, e)
                result.failures.append(e)
                continue

            result.files[self.backend.file_name(name)] = source
            result.classes.append(name)

        if self.config.write_package_init:
            package = self._format(self.backend.render_package(result.classes, self.generation_comment))
            result.files[PACKAGE_INIT] = package

        return result

    def _generate_class(self, analyzer: SchemaAnalyzer, name: str) -> str:
        definition = analyzer.document.definitions[name]
        class_def = analyzer.analyze_definition(definition)
        source = self._format(self.backend.render_class(class_def, self.generation_comment))
        if self.config.output.validate_before_write:
            try:
                self.writer.validate(source)
            except GenerationError as e:
                raise e.with_context(definition=name, schema_path=definition.source_path)
        logger.debug("Generated %s (%d fields)", name, len(class_def.fields))
        return source

    def _format(self, source: str) -> str:
        if self.formatter is None:
            return source
        return self.formatter.format(source, self.config.formatter)

    def write(self, result: GenerationResult, output_dir: str | Path) -> list[Path]:
        """
        Write generated files to the output directory.

        Args:
            result: The result of :meth:`generate`
            output_dir: Destination directory, created if needed

        Returns:
            Paths of the files written
        """
        output_dir = Path(output_dir)
        written = []
        for file_name, source in result.files.items():
            path = output_dir / file_name
            try:
                if self.config.output.mode == OutputMode.ERROR_IF_EXISTS and file_name != PACKAGE_INIT:
                    self.writer.write_if_not_exists(path, source, validate=False)
                else:
                    self.writer.write(path, source, validate=False)
            except GenerationError as e:
                definition = Path(file_name).stem
                logger.error("Failed to write %s: %s", definition, e)
                result.failures.append(e.with_context(definition=definition))
                continue
            logger.info("Wrote %s", path)
            written.append(path)
        return written


def generate(
    schema_path: str | Path,
    output_dir: str | Path,
    config: CodeGeneratorConfig | None = None,
    generation_comment: list[str] | None = None,
) -> int:
    """
    Generate the model package of a schema file.

    Args:
        schema_path: Path of the JSON schema document
        output_dir: Directory receiving one module per definition
        config: Generation options
        generation_comment: Header lines written at the top of each file

    Returns:
        0 on success, 1 if the schema could not be loaded or any definition failed
    """
    config = config or CodeGeneratorConfig()
    if generation_comment is None:
        generation_comment = [
            f"Generated by json_schema_to_model {__version__} from {Path(schema_path).name}.",
            "Do not edit by hand, changes will be lost on the next generation.",
        ]

    try:
        with open(schema_path, encoding="utf-8") as f:
            schema = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot load schema %s: %s", schema_path, e)
        return 1

    generator = PipelineGenerator(schema, config, generation_comment)
    try:
        result = generator.generate()
    except GenerationError as e:
        logger.error("Generation aborted: %s", e)
        return 1

    generator.write(result, output_dir)

    if not result.ok:
        logger.error(
            "%d definition(s) failed: %s",
            len(result.failures),
            ", ".join(str(e.definition) for e in result.failures),
        )
        return 1

    logger.info("Generated %d model(s) in %s", len(result.classes), output_dir)
    return 0
