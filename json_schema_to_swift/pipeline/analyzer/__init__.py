"""
Analyzer module.

Contains type resolution, property extraction, inheritance composition
and model building.
"""

from __future__ import annotations

from .extends import compose_extends
from .ir_nodes import (
    Header,
    ModelDef,
    PropertyDef,
    SkippedSchema,
    TypeRef,
    Unsupported,
)
from .model_builder import ModelBuilder, build_header
from .properties import extract_properties
from .type_resolver import TypeResolver

__all__ = [
    "Header",
    "ModelDef",
    "PropertyDef",
    "SkippedSchema",
    "TypeRef",
    "Unsupported",
    "ModelBuilder",
    "TypeResolver",
    "build_header",
    "compose_extends",
    "extract_properties",
]
