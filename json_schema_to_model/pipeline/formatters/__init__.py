"""
Post-processing formatters for generated code.
"""

from __future__ import annotations

from ..config import FormatterConfig
from .base import Formatter
from .black_formatter import BlackFormatter


def create_formatter(config: FormatterConfig) -> Formatter | None:
    """Return the formatter to run on generated modules, or None when formatting is disabled."""
    if not config.enabled:
        return None
    return BlackFormatter()


__all__ = [
    "Formatter",
    "BlackFormatter",
    "create_formatter",
]
