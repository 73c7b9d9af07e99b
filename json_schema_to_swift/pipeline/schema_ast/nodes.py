"""
AST (Abstract Syntax Tree) node definitions for JSON Schema.

These nodes represent the shape of one schema node before any reference
resolution or Swift-specific processing. The set is closed: every raw
value classifies into exactly one of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaNode:
    """Base class for all AST nodes."""

    # Original source location in schema (for log messages)
    source_path: str = ""


@dataclass(frozen=True)
class RefNode(SchemaNode):
    """Represents a $ref (unresolved reference)."""

    ref_path: str = ""  # e.g. "./address.json" or "#/definitions/Point"

    @property
    def is_local(self) -> bool:
        return self.ref_path.startswith("#")


@dataclass(frozen=True)
class ObjectNode(SchemaNode):
    """Represents `type: "object"`. Nested properties are not expanded."""

    properties: dict[str, Any] | None = None
    required: tuple[str, ...] = ()


@dataclass(frozen=True)
class ArrayNode(SchemaNode):
    """Represents `type: "array"`."""

    items: Any = None  # Raw items schema, classified lazily


@dataclass(frozen=True)
class PrimitiveNode(SchemaNode):
    """Represents a primitive type (string, integer, number, boolean, any)."""

    type_name: str = ""


@dataclass(frozen=True)
class UnrecognizedNode(SchemaNode):
    """A value that is not a supported schema node.

    Carries the raw value and the reason so callers can log it.
    """

    raw: Any = None
    reason: str = ""


@dataclass
class SchemaFile:
    """A decoded schema file."""

    path: str = ""
    name: str = ""  # File stem, used for the model name
    content: Any = None
