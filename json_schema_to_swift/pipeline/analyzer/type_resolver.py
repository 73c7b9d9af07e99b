"""
Type resolver.

Maps one schema node to the Swift type it stands for. References are
resolved by name unless deep resolution is enabled, in which case the
referenced file is read and its own type is used.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ...utils import model_name_for, ref_base_name
from ..config import GeneratorConfig
from ..errors import ReferenceCycleError, ReferenceLoadError
from ..schema_ast import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaParser,
    UnrecognizedNode,
)
from .ir_nodes import ANY_OBJECT_TYPE_NAME, OBJECT_TYPE_NAME, TypeRef, Unsupported

logger = logging.getLogger(__name__)


class TypeResolver:
    """Resolves schema nodes to TypeRefs."""

    # Type mapping from schema primitive types to Swift types
    BASIC_TYPES: dict[str, str] = {
        "string": "String",
        "integer": "Int",
        "number": "Double",
        "boolean": "Bool",
        "any": "Any",
    }

    def __init__(
        self,
        config: GeneratorConfig,
        base_dir: str | Path | None = None,
        chain: tuple[str, ...] = (),
    ):
        """
        Initialize the resolver.

        Args:
            config: Code generation configuration
            base_dir: Directory that file $refs are relative to (deep mode)
            chain: Files currently being resolved, outermost first
        """
        self.config = config
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.chain = chain
        self.parser = SchemaParser()

    @classmethod
    def for_file(cls, config: GeneratorConfig, path: str | Path | None) -> TypeResolver:
        """Resolver for nodes that live in the schema file at `path`."""
        if path is None:
            return cls(config)
        # The file itself only joins the chain when a $ref hop reaches it
        return cls(config, Path(path).resolve().parent)

    def resolve(self, node: Any, path: str = "#") -> TypeRef | Unsupported:
        """
        Resolve a schema node.

        Args:
            node: The raw schema node
            path: Location of the node (for log messages)

        Returns:
            The resolved TypeRef, or Unsupported with a reason

        Raises:
            ReferenceLoadError: Deep mode could not read a referenced file
            ReferenceCycleError: Deep mode found a $ref cycle
        """
        schema_node = self.parser.parse(node, path)

        match schema_node:
            case RefNode():
                return self._resolve_ref(schema_node)
            case ObjectNode():
                return TypeRef(type_name=OBJECT_TYPE_NAME)
            case ArrayNode():
                return self._resolve_array(schema_node)
            case PrimitiveNode():
                return TypeRef(type_name=self.BASIC_TYPES[schema_node.type_name])
            case UnrecognizedNode():
                logger.debug("%s: %s", schema_node.source_path, schema_node.reason)
                return Unsupported(reason=schema_node.reason, raw=schema_node.raw)

        raise AssertionError(f"unexpected schema node {schema_node!r}")

    def reference_type(self, ref_path: str) -> TypeRef:
        """By-name type for a $ref path."""
        return TypeRef(
            type_name=model_name_for(ref_base_name(ref_path), self.config.namespace),
            is_reference=True,
        )

    def _resolve_array(self, node: ArrayNode) -> TypeRef:
        """Resolve an array node. Unresolvable items fall back to AnyObject."""
        items_type = None
        if node.items is not None:
            items_type = self.resolve(node.items, f"{node.source_path}/items")

        if not isinstance(items_type, TypeRef):
            logger.debug("%s: array items not resolved, using %s", node.source_path, ANY_OBJECT_TYPE_NAME)
            return TypeRef(type_name=ANY_OBJECT_TYPE_NAME, is_array=True)

        return TypeRef(type_name=items_type.type_name, is_array=True, is_reference=items_type.is_reference)

    def _resolve_ref(self, node: RefNode) -> TypeRef | Unsupported:
        """Resolve a $ref, following it on disk in deep mode."""
        if not ref_base_name(node.ref_path):
            return Unsupported(reason="empty $ref name", raw=node.ref_path)

        by_name = self.reference_type(node.ref_path)

        if not self.config.deep_types or node.is_local or self.base_dir is None:
            return by_name

        target = (self.base_dir / node.ref_path.split("#", 1)[0]).resolve()
        key = str(target)
        if key in self.chain:
            raise ReferenceCycleError([*self.chain, key])

        logger.debug("%s: reading referenced schema %s", node.source_path, target)
        schema = self._load(target)

        inner = TypeResolver(self.config, target.parent, (*self.chain, key)).resolve(schema, node.ref_path)
        if isinstance(inner, Unsupported):
            return Unsupported(reason=f"referenced schema {node.ref_path}: {inner.reason}", raw=inner.raw)

        # Model-bearing schemas stay named references
        if inner.is_object:
            return by_name
        return inner

    @staticmethod
    def _load(path: Path) -> Any:
        """Read and decode a referenced schema. Not cached."""
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise ReferenceLoadError(str(path), e.strerror or str(e)) from e
        except json.JSONDecodeError as e:
            raise ReferenceLoadError(str(path), f"parse error: {e}") from e
        except UnicodeDecodeError as e:
            raise ReferenceLoadError(str(path), f"decode error: {e}") from e
