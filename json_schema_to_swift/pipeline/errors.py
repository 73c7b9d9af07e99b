"""
Exceptions raised by the generator pipeline.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all generator errors."""


class SchemaResolutionError(GenerationError):
    """A schema could not be resolved while following references."""


class ReferenceLoadError(SchemaResolutionError):
    """A referenced schema file could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot load referenced schema {path}: {reason}")


class ReferenceCycleError(SchemaResolutionError):
    """A chain of file references loops back on itself."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__("reference cycle: " + " -> ".join(chain))


class OutputError(GenerationError):
    """Generated code could not be written."""
