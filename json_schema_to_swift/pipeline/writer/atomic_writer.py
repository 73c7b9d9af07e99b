"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputMode
from ..errors import OutputError


def validate_swift(content: str) -> None:
    """Basic structural checks on generated Swift code.

    Raises:
        OutputError: If the code has no type declaration or unbalanced braces
    """
    if "class " not in content and "struct " not in content:
        raise OutputError("Generated Swift code has no type definitions")

    # Comment lines hold user text (header project, company)
    code = "\n".join(line for line in content.splitlines() if not line.lstrip().startswith("//"))
    open_braces = code.count("{")
    close_braces = code.count("}")
    if open_braces != close_braces:
        raise OutputError(f"Generated Swift code has unbalanced braces: {open_braces} open, {close_braces} close")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(
        self,
        mode: OutputMode = OutputMode.FORCE,
        validate: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            mode: How to handle an existing target file
            validate: Validation function, None disables validation
        """
        self.mode = mode
        self._validate = validate

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OutputError: If validation fails or the file exists in ERROR_IF_EXISTS mode
            OSError: If file operations fail
        """
        path = Path(path)
        if self.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise OutputError(f"Output file already exists: {path}. Use force mode to overwrite.")

        if self._validate is not None:
            self._validate(content)

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
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise
