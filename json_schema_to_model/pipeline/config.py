"""
Configuration for the model generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .capabilities import CapabilitySet


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    FORCE = "force"  # Default: overwrite, models are regenerated on every run
    ERROR_IF_EXISTS = "error"  # Fail the definition if its file exists


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check that generated code parses before writing
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for post-processing formatters."""

    # Whether formatting is enabled
    enabled: bool = False

    # Line length for the formatter
    line_length: int = 120

    # Python version target (e.g., "py312", "py313")
    target_version: str = "py312"

    # Whether to use string normalization (convert single quotes to double)
    string_normalization: bool = True

    magic_trailing_comma: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for model generation."""

    # Definitions to skip entirely
    ignore_classes: list[str] = field(default_factory=list)

    # Base capability set the generated classes derive from
    base: CapabilitySet = field(default_factory=CapabilitySet)

    # Width at which property descriptions are wrapped
    wrap_width: int = 120

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # Write an __init__.py re-exporting every generated class
    write_package_init: bool = True

    # Abort the whole run on the first failing definition
    fail_fast: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary (e.g. a JSON config file)."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "base":
                config.base = CapabilitySet.from_dict(v)
            elif k == "output":
                config.output = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.FORCE.value)),
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif k == "formatter":
                config.formatter = FormatterConfig(**v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ignore_classes": self.ignore_classes,
            "base": self.base.to_dict(),
            "wrap_width": self.wrap_width,
            "add_generation_comment": self.add_generation_comment,
            "write_package_init": self.write_package_init,
            "fail_fast": self.fail_fast,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
            "formatter": {
                "enabled": self.formatter.enabled,
                "line_length": self.formatter.line_length,
                "target_version": self.formatter.target_version,
                "string_normalization": self.formatter.string_normalization,
                "magic_trailing_comma": self.formatter.magic_trailing_comma,
            },
        }
