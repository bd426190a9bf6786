"""
Base class for post-processing formatters of generated model modules.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..config import FormatterConfig

logger = logging.getLogger(__name__)


class Formatter(ABC):
    """A formatting tool applied to every generated module.

    Formatting is best effort: when the tool is not installed the source is
    returned as rendered, after a single warning.
    """

    # Tool name and the extra that installs it, used in the warning
    name: str = ""
    install_extra: str = "format"

    def __init__(self):
        self._warned = False

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format generated code, or return it unchanged if the tool is missing.

        Args:
            code: The generated source
            config: Formatter configuration

        Returns:
            Formatted code
        """
        if not self.is_available():
            if not self._warned:
                logger.warning(
                    "Formatting requested but %s is not installed; install json_schema_to_model[%s]",
                    self.name,
                    self.install_extra,
                )
                self._warned = True
            return code
        return self._format(code, config)

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the tool can be imported."""

    @abstractmethod
    def _format(self, code: str, config: FormatterConfig) -> str:
        """Run the installed tool on the code."""
