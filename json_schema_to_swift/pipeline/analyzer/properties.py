"""
Property extraction for object schemas.
"""

from __future__ import annotations

import logging
from typing import Any

from .ir_nodes import UNKNOWN_TYPE_NAME, PropertyDef, Unsupported
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


def required_fields(schema: dict[str, Any]) -> frozenset[str]:
    """Keys listed in the schema's `required` array. Absent or malformed means none."""
    required = schema.get("required")
    if not isinstance(required, list):
        return frozenset()
    return frozenset(r for r in required if isinstance(r, str))


def is_required(key: str, node: Any, schema_required: frozenset[str]) -> bool:
    """A property is required by its own `required: true` flag or by the owning schema."""
    own_flag = isinstance(node, dict) and node.get("required") is True
    return own_flag or key in schema_required


def extract_properties(schema: dict[str, Any], resolver: TypeResolver) -> tuple[PropertyDef, ...]:
    """
    Build the ordered property list of an object schema.

    Properties keep the schema's declaration order. A property whose type
    cannot be resolved is kept with the sentinel type and a warning.

    Args:
        schema: An object schema with a `properties` mapping
        resolver: Type resolver for the schema's file

    Returns:
        Tuple of PropertyDef in declaration order
    """
    schema_required = required_fields(schema)
    properties = []

    for key, node in schema["properties"].items():
        resolved = resolver.resolve(node, f"#/properties/{key}")
        required = is_required(key, node, schema_required)

        if isinstance(resolved, Unsupported):
            logger.warning("property '%s' has an unsupported type (%s), using %s", key, resolved.reason, UNKNOWN_TYPE_NAME)
            properties.append(
                PropertyDef(
                    key=key,
                    type_name=UNKNOWN_TYPE_NAME,
                    required=required,
                    unresolved_reason=resolved.reason,
                )
            )
            continue

        properties.append(
            PropertyDef(
                key=key,
                type_name=resolved.type_name,
                is_array=resolved.is_array,
                is_reference=resolved.is_reference,
                required=required,
            )
        )

    return tuple(properties)
