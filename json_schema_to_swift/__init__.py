"""JSON Schema to Swift Generator

A Python package for generating Swift model classes and structs from
JSON Schema files, with reference resolution, configurable inheritance
and Jinja2 templates.
"""

__version__ = "1.0.0"

from .pipeline import (
    GenerationReport,
    GeneratorConfig,
    HeaderConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "GenerationReport",
    "GeneratorConfig",
    "HeaderConfig",
    "OutputConfig",
    "OutputMode",
]
