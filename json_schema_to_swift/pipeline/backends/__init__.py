"""
Code generation backends.

Contains language-specific code generators.
"""

from __future__ import annotations

from .base import CodeBackend
from .swift_backend import SwiftBackend

__all__ = [
    "CodeBackend",
    "SwiftBackend",
]
