"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic so that a failed or interrupted run
never leaves a partial model file behind.
"""

from __future__ import annotations

import ast
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import EmissionError


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Validate the content
    2. Write to a temporary file in the same directory
    3. Atomically replace the target file
    """

    def __init__(self, validate_python: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_python: Optional validation function for Python code
        """
        self._validate_python = validate_python or self._default_validate_python

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            EmissionError: If validation fails
            OSError: If file operations fail
        """
        if validate:
            self.validate(content, path)

        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            EmissionError: If the file already exists or validation fails
        """
        if path.exists():
            raise EmissionError(f"Output file already exists: {path}. Use force mode to overwrite.", schema_path=str(path))
        self.write(path, content, validate)

    def validate(self, content: str, path: Path | None = None) -> None:
        """Validate generated Python code.

        Raises:
            EmissionError: If the code is not valid Python
        """
        try:
            self._validate_python(content)
        except EmissionError as e:
            raise e.with_context(schema_path=str(path) if path else None)

    def _default_validate_python(self, content: str) -> None:
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise EmissionError(f"Generated Python code is not valid: {e}") from e
