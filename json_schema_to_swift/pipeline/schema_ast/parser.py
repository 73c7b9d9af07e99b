"""
JSON Schema node classifier.

Phase 1 of the pipeline: turn one raw schema value into a typed AST node
without resolving references.
"""

from __future__ import annotations

from typing import Any

from .nodes import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaNode,
    UnrecognizedNode,
)


class SchemaParser:
    """Classifies raw JSON Schema values into AST nodes."""

    # Primitive type names
    PRIMITIVE_TYPES = {"string", "integer", "number", "boolean", "any"}

    def parse(self, schema: Any, path: str = "#") -> SchemaNode:
        """
        Classify a schema node.

        Args:
            schema: The raw schema value
            path: Location of the node (for log messages)

        Returns:
            Appropriate SchemaNode subclass, UnrecognizedNode when the
            value is not a supported shape
        """
        if not isinstance(schema, dict):
            return UnrecognizedNode(source_path=path, raw=schema, reason=f"not an object ({type(schema).__name__})")

        # $ref takes precedence over type
        if "$ref" in schema:
            return self._parse_ref_node(schema, path)

        if "type" not in schema:
            return UnrecognizedNode(source_path=path, raw=schema, reason="no type or $ref")

        type_value = schema["type"]

        # JSON Schema allows an array of types, which is not handled
        if not isinstance(type_value, str):
            return UnrecognizedNode(
                source_path=path,
                raw=type_value,
                reason=f"type of kind {type(type_value).__name__} not handled",
            )

        if type_value == "object":
            return self._parse_object_node(schema, path)

        if type_value == "array":
            return ArrayNode(source_path=path, items=schema.get("items"))

        if type_value in self.PRIMITIVE_TYPES:
            return PrimitiveNode(source_path=path, type_name=type_value)

        return UnrecognizedNode(source_path=path, raw=type_value, reason=f"type not handled: {type_value}")

    def _parse_ref_node(self, schema: dict[str, Any], path: str) -> SchemaNode:
        """Parse a $ref node."""
        ref_path = schema["$ref"]
        if not isinstance(ref_path, str) or not ref_path:
            return UnrecognizedNode(source_path=path, raw=ref_path, reason="$ref is not a non-empty string")
        return RefNode(source_path=path, ref_path=ref_path)

    def _parse_object_node(self, schema: dict[str, Any], path: str) -> ObjectNode:
        """Parse an object type node."""
        properties = schema.get("properties")
        if not isinstance(properties, dict):
            properties = None

        # `required` may be absent, or a boolean (draft 3 style) on nested nodes
        required = schema.get("required")
        if isinstance(required, list):
            required_fields = tuple(r for r in required if isinstance(r, str))
        else:
            required_fields = ()

        return ObjectNode(source_path=path, properties=properties, required=required_fields)
