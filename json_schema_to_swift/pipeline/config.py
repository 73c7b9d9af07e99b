"""
Configuration for the Swift model generator pipeline.

The configuration is immutable: it is built once (from a JSON file, CLI
flags or both) and threaded explicitly through every pipeline phase.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Raise error if file exists
    FORCE = "force"  # Overwrite (default)


@dataclass(frozen=True)
class HeaderConfig:
    """Values for the optional file header. Missing values become placeholders."""

    project: str | None = None
    author: str | None = None
    company: str | None = None


@dataclass(frozen=True)
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check the generated code before writing
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration options for code generation."""

    # Prefix prepended to every generated model name
    namespace: str = ""

    # Parse the `extends` key of a schema into a superclass
    enable_extends: bool = False

    # Generate `struct` instead of `class`
    use_struct: bool = False

    # Follow file $refs to find the type they ultimately describe
    deep_types: bool = False

    # Explicit inheritance list, replaces the schema superclass
    inherits: tuple[str, ...] = ()

    # Protocols, only used when no superclass was resolved
    protocols: tuple[str, ...] = ()

    # Add the project/author/copyright header
    has_header: bool = False
    header: HeaderConfig = field(default_factory=HeaderConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> GeneratorConfig:
        """Create a config from a dictionary. Unknown keys are ignored."""
        known = {f.name for f in dataclasses.fields(GeneratorConfig)}
        kwargs: dict[str, Any] = {}
        for k, v in d.items():
            if k not in known:
                continue
            if k in ("inherits", "protocols"):
                v = tuple(v or ())
            elif k == "header":
                v = HeaderConfig(**(v or {}))
            elif k == "output":
                v = v or {}
                v = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.FORCE.value)),
                    validate_before_write=v.get("validate_before_write", True),
                )
            kwargs[k] = v
        return GeneratorConfig(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "namespace": self.namespace,
            "enable_extends": self.enable_extends,
            "use_struct": self.use_struct,
            "deep_types": self.deep_types,
            "inherits": list(self.inherits),
            "protocols": list(self.protocols),
            "has_header": self.has_header,
            "header": dataclasses.asdict(self.header),
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
        }

    def with_overrides(self, **overrides: Any) -> GeneratorConfig:
        """Return a copy with the given fields replaced. None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)
