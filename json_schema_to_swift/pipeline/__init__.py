"""
Pipeline - JSON Schema to Swift model generator.

This module splits generation into phases:

1. Phase 1 (Parser): Classify JSON Schema nodes into a Schema AST
2. Phase 2 (Analyzer): Resolve types and build one ModelDef per schema
3. Phase 3 (Backend): Render the ModelDef with a Jinja2 template
4. Phase 4 (Writer): Atomically write the generated file
"""

from __future__ import annotations

from .config import GeneratorConfig, HeaderConfig, OutputConfig, OutputMode
from .errors import (
    GenerationError,
    OutputError,
    ReferenceCycleError,
    ReferenceLoadError,
    SchemaResolutionError,
)
from .generator import GenerationReport, PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "GenerationReport",
    "GeneratorConfig",
    "HeaderConfig",
    "OutputConfig",
    "OutputMode",
    "GenerationError",
    "SchemaResolutionError",
    "ReferenceLoadError",
    "ReferenceCycleError",
    "OutputError",
]
