"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaFile,
    SchemaNode,
    UnrecognizedNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "ObjectNode",
    "ArrayNode",
    "RefNode",
    "PrimitiveNode",
    "UnrecognizedNode",
    "SchemaFile",
    "SchemaParser",
]
