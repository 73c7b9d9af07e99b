"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import ModelDef, PropertyDef, TypeRef

TEMPLATES_DIR = Path(__file__).parent.parent.parent / "templates"


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from IR type names to language types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # Default template file name
    TEMPLATE_NAME: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, template_path: str | Path | None = None):
        """
        Initialize the backend.

        Args:
            template_path: Custom template file, replaces the packaged one
        """
        self._setup_templates(template_path)

    def _setup_templates(self, template_path: str | Path | None) -> None:
        """Set up Jinja2 templates."""
        if template_path is not None:
            template_path = Path(template_path)
            template_dir = template_path.parent
            template_name = template_path.name
        else:
            template_dir = TEMPLATES_DIR / self.TEMPLATE_LANG
            template_name = self.TEMPLATE_NAME

        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.jinja_env.get_template(template_name)

    def generate(self, model: ModelDef) -> str:
        """
        Generate code for one model.

        Args:
            model: The model definition

        Returns:
            Generated code as a string
        """
        return self.template.render(**self._prepare_model_context(model))

    def output_file_name(self, model: ModelDef) -> str:
        """Name of the file the model is written to."""
        return f"{model.model_name}.{self.FILE_EXTENSION}"

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    def _prepare_model_context(self, model: ModelDef) -> dict[str, Any]:
        """
        Prepare the template context for a model.

        Args:
            model: The model definition

        Returns:
            Dictionary of template variables
        """
        return {
            "model_name": model.model_name,
            "header": model.header,
            "is_struct": model.is_struct,
            "extends": list(model.extends),
            "has_super_class": model.has_super_class,
            "properties": [self._prepare_property_context(p) for p in model.properties],
        }

    def _prepare_property_context(self, prop: PropertyDef) -> dict[str, Any]:
        """Template variables for one property."""
        return {
            "key": prop.key,
            "type_name": self.TYPE_MAP.get(prop.type_name, prop.type_name),
            "type": self.translate_type(prop.type_ref),
            "is_array": prop.is_array,
            "is_reference": prop.is_reference,
            "required": prop.required,
        }
