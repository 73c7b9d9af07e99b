"""
Model builder.

Phase 2 of the pipeline: turn one decoded schema file into a ModelDef.
Schemas that do not describe a model produce a SkippedSchema instead;
nothing here aborts a batch.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any

from ...utils import model_name_for
from ..config import GeneratorConfig, HeaderConfig
from ..errors import SchemaResolutionError
from .extends import compose_extends
from .ir_nodes import Header, ModelDef, SkippedSchema, TypeRef
from .properties import extract_properties
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


def build_header(header: HeaderConfig, today: date | None = None) -> Header:
    """Header metadata, with placeholders for missing values."""
    today = today or date.today()
    return Header(
        project_name=header.project or "<PROJECT>",
        author=header.author or "<AUTHOR>",
        now=today.strftime("%d/%m/%y"),
        copyright=f"{today.year} {header.company or '<COMPANY>'}",
    )


class ModelBuilder:
    """Builds ModelDefs from schema files."""

    def __init__(self, config: GeneratorConfig):
        self.config = config

    def build(
        self,
        file_name: str,
        schema: Any,
        source_path: str | Path | None = None,
        today: date | None = None,
    ) -> ModelDef | SkippedSchema:
        """
        Build the model for one schema.

        Args:
            file_name: File-derived model name (usually the file stem)
            schema: The decoded schema
            source_path: Path of the schema file, used for deep $ref resolution
            today: Date for the header (defaults to today)

        Returns:
            ModelDef, or SkippedSchema when the schema does not describe a model
        """
        label = str(source_path) if source_path is not None else file_name

        if not isinstance(schema, dict) or schema.get("type") != "object":
            return self._skip(label, "is not of type object")

        if not isinstance(schema.get("properties"), dict):
            return self._skip(label, "missing properties")

        resolver = TypeResolver.for_file(self.config, source_path)

        try:
            super_class = self._resolve_super_class(schema, resolver, label)
            properties = extract_properties(schema, resolver)
        except SchemaResolutionError as e:
            return self._skip(label, str(e))

        extends = compose_extends(
            super_class,
            self.config.inherits,
            self.config.protocols,
            self.config.use_struct,
        )

        model = ModelDef(
            model_name=model_name_for(file_name, self.config.namespace),
            properties=properties,
            extends=extends,
            has_super_class=super_class is not None,
            is_struct=self.config.use_struct,
            header=build_header(self.config.header, today) if self.config.has_header else None,
        )
        logger.info("%s: model %s with %d properties", label, model.model_name, len(properties))
        return model

    def _resolve_super_class(self, schema: dict[str, Any], resolver: TypeResolver, label: str) -> str | None:
        """Superclass name from the `extends` key, when enabled and resolvable."""
        if not self.config.enable_extends or "extends" not in schema:
            return None

        resolved = resolver.resolve(schema["extends"], "#/extends")
        if not isinstance(resolved, TypeRef):
            logger.warning("%s: extends ignored (%s)", label, resolved.reason)
            return None
        return resolved.type_name

    @staticmethod
    def _skip(label: str, reason: str) -> SkippedSchema:
        logger.warning("%s %s SKIPPED", label, reason)
        return SkippedSchema(path=label, reason=reason)
