"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed schema, ready for rendering. They are
immutable value objects, built fresh for every schema file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Generic marker for inline `type: "object"` schemas (untyped dictionary)
OBJECT_TYPE_NAME = "Object"

# Element type for arrays whose items could not be resolved
ANY_OBJECT_TYPE_NAME = "AnyObject"

# Sentinel type for properties whose type could not be resolved
UNKNOWN_TYPE_NAME = "Any"


@dataclass(frozen=True)
class TypeRef:
    """A resolved type."""

    type_name: str = ""  # e.g. "Int", "MyAddress", "Object"
    is_array: bool = False
    is_reference: bool = False  # Names another generated model

    @property
    def is_object(self) -> bool:
        """Whether this is the generic object marker."""
        return self.type_name == OBJECT_TYPE_NAME and not self.is_array and not self.is_reference


@dataclass(frozen=True)
class Unsupported:
    """A schema construct the resolver does not handle."""

    reason: str = ""
    raw: Any = None


@dataclass(frozen=True)
class PropertyDef:
    """A property of a generated model."""

    key: str = ""
    type_name: str = ""
    is_array: bool = False
    is_reference: bool = False
    required: bool = False

    # Set when the type fell back to the sentinel
    unresolved_reason: str | None = None

    @property
    def type_ref(self) -> TypeRef:
        return TypeRef(type_name=self.type_name, is_array=self.is_array, is_reference=self.is_reference)


@dataclass(frozen=True)
class Header:
    """File header metadata."""

    project_name: str = "<PROJECT>"
    author: str = "<AUTHOR>"
    now: str = ""  # dd/mm/yy
    copyright: str = ""  # "<year> <company>"


@dataclass(frozen=True)
class ModelDef:
    """A model (class or struct) to generate."""

    model_name: str = ""
    properties: tuple[PropertyDef, ...] = ()

    # Inheritance/conformance list
    extends: tuple[str, ...] = ()
    has_super_class: bool = False

    is_struct: bool = False
    header: Header | None = None


@dataclass(frozen=True)
class SkippedSchema:
    """A schema that does not produce a model."""

    path: str = ""
    reason: str = ""
