"""
Pipeline generator.

Runs the full pipeline over a source file or directory:

1. Load: discover and decode schema files
2. Analyze: build a ModelDef per schema
3. Render: turn the ModelDef into Swift source
4. Write: atomically write `<output_dir>/<ModelName>.swift`

Every file is handled on its own. A file that fails at any step is
reported as skipped and the batch goes on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

from .analyzer import ModelBuilder, ModelDef, SkippedSchema
from .backends import SwiftBackend
from .config import GeneratorConfig
from .errors import OutputError
from .loader import discover_schema_files, load_schema_file
from .writer import AtomicWriter, validate_swift

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Outcome of a batch run."""

    written: list[Path] = field(default_factory=list)
    skipped: list[SkippedSchema] = field(default_factory=list)


class PipelineGenerator:
    """Generates Swift models from JSON schemas."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        template_path: str | Path | None = None,
        today: date | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Code generation configuration
            template_path: Custom Jinja2 template file
            today: Date used in headers (defaults to today)
        """
        self.config = config or GeneratorConfig()
        self.builder = ModelBuilder(self.config)
        self.backend = SwiftBackend(template_path)
        self.today = today
        self.writer = AtomicWriter(
            mode=self.config.output.mode,
            validate=validate_swift if self.config.output.validate_before_write else None,
        )

    def build(self, name: str, schema: Any, source_path: str | Path | None = None) -> ModelDef | SkippedSchema:
        """Build the model for one decoded schema."""
        return self.builder.build(name, schema, source_path, self.today)

    def generate(self, name: str, schema: Any, source_path: str | Path | None = None) -> str | SkippedSchema:
        """Generate Swift code for one decoded schema."""
        model = self.build(name, schema, source_path)
        if isinstance(model, SkippedSchema):
            return model
        return self.backend.generate(model)

    def run(self, source: str | Path, output_dir: str | Path) -> GenerationReport:
        """
        Generate models for every schema under `source`.

        Args:
            source: A schema file or a directory of schema files
            output_dir: Directory the Swift files are written to

        Returns:
            GenerationReport listing written files and skipped schemas
        """
        report = GenerationReport()
        output_dir = Path(output_dir)

        for path in discover_schema_files(source):
            schema_file = load_schema_file(path)
            if isinstance(schema_file, SkippedSchema):
                report.skipped.append(schema_file)
                continue

            model = self.build(schema_file.name, schema_file.content, schema_file.path)
            if isinstance(model, SkippedSchema):
                report.skipped.append(model)
                continue

            dest = output_dir / self.backend.output_file_name(model)
            try:
                self.writer.write(dest, self.backend.generate(model))
            except (OutputError, OSError) as e:
                logger.warning("%s cannot be written: %s", dest, e)
                report.skipped.append(SkippedSchema(path=schema_file.path, reason=str(e)))
                continue

            logger.info("%s written", dest)
            report.written.append(dest)

        return report
