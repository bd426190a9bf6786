"""JSON Schema to Model Generator

Generates one final Python model class per JSON Schema definition, with
typed fields, validating setters, enum constants and a structural export.
"""

__version__ = "1.0.0"

from .pipeline import (
    CapabilitySet,
    CodeGeneratorConfig,
    EmissionError,
    GenerationError,
    OutputMode,
    PipelineGenerator,
    ResolutionError,
    SchemaShapeError,
    generate,
)

__all__ = [
    "generate",
    "PipelineGenerator",
    "CapabilitySet",
    "CodeGeneratorConfig",
    "OutputMode",
    "GenerationError",
    "ResolutionError",
    "SchemaShapeError",
    "EmissionError",
]
