"""
Pipeline - JSON Schema to model class generator.

This module provides a multi-phase architecture for generating one Python
model class per schema definition:

1. Phase 1 (Parser): Parse the JSON document into structured definitions
2. Phase 2 (Analyzer): Resolve references, infer types, compile constraints
3. Phase 3 (Backend): Render the IR through jinja2 templates
4. Phase 4 (Formatter): Optional post-processing with black
5. Phase 5 (Writer): Validate and atomically write one file per definition
"""

from __future__ import annotations

from .capabilities import CapabilitySet
from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .errors import EmissionError, GenerationError, ResolutionError, SchemaShapeError
from .generator import GenerationResult, PipelineGenerator, generate

__all__ = [
    "PipelineGenerator",
    "GenerationResult",
    "generate",
    "CapabilitySet",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "GenerationError",
    "ResolutionError",
    "SchemaShapeError",
    "EmissionError",
]
