"""
Schema file discovery and decoding.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .analyzer.ir_nodes import SkippedSchema
from .schema_ast import SchemaFile

logger = logging.getLogger(__name__)


def discover_schema_files(source: str | Path) -> list[Path]:
    """
    List the schema files for a source path.

    A file is returned as is. A directory yields its `.json` files (not
    recursive), sorted by name.
    """
    source = Path(source)
    if not source.is_dir():
        return [source]
    return sorted(p for p in source.iterdir() if p.is_file() and p.suffix == ".json")


def load_schema_file(path: str | Path) -> SchemaFile | SkippedSchema:
    """Read and decode one schema file. Decode failures become a skip."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            content = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("%s parse error: %s SKIPPED", path, e)
        return SkippedSchema(path=str(path), reason=f"parse error: {e}")
    except OSError as e:
        logger.warning("%s cannot be read: %s SKIPPED", path, e)
        return SkippedSchema(path=str(path), reason=f"read error: {e}")

    logger.debug("%s loaded", path)
    return SchemaFile(path=str(path), name=path.stem, content=content)
