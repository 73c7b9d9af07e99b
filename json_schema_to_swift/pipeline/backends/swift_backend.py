"""
Swift code generation backend.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import OBJECT_TYPE_NAME, TypeRef
from .base import CodeBackend


class SwiftBackend(CodeBackend):
    """Renders models as Swift classes or structs."""

    # The generic object marker is an untyped JSON dictionary
    TYPE_MAP = {
        OBJECT_TYPE_NAME: "[String: AnyObject]",
    }

    TEMPLATE_LANG = "swift"
    TEMPLATE_NAME = "model.swift.jinja2"
    FILE_EXTENSION = "swift"

    def translate_type(self, type_ref: TypeRef) -> str:
        """Swift type for an IR type, e.g. `Int`, `[MyAddress]`."""
        name = self.TYPE_MAP.get(type_ref.type_name, type_ref.type_name)
        if type_ref.is_array:
            return f"[{name}]"
        return name
