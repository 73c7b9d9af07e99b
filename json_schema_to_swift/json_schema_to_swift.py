import json
import logging

import click

from .pipeline import GeneratorConfig, HeaderConfig, PipelineGenerator

# -v count -> logging level
VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


class ClickEchoHandler(logging.Handler):
    """Sends log records to stderr through click.echo."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: int) -> logging.Logger:
    """Set the package log level from the -v count and attach the echo handler once."""
    level = VERBOSITY_LEVELS[min(verbose, len(VERBOSITY_LEVELS) - 1)]
    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(level)
    if not any(isinstance(h, ClickEchoHandler) for h in package_logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        package_logger.addHandler(handler)
    return package_logger


@click.command(epilog="Example: json_schema_to_swift -s model.json --use-struct --namespace My")
@click.option("--source", "-s", required=True, type=click.Path(exists=True), help="Source file or dir")
@click.option("--output-dir", "-o", default="./output", type=click.Path(file_okay=False), help="Output dir")
@click.option("--template", "-t", default=None, type=click.Path(exists=True, dir_okay=False), help="Specify template file")
@click.option("--config", "-C", default=None, type=click.Path(exists=True, dir_okay=False), help="JSON config file")
@click.option("--use-struct", is_flag=True, default=False, help="Use `struct` (default is `class`)")
@click.option("--enable-extends", is_flag=True, default=False, help="Enable parsing of `extends` key in json schema")
@click.option("--deep-types", is_flag=True, default=False, help="Read `$ref` file paths for `type` searching")
@click.option("--inherits", multiple=True, help="Specify inheritances (repeatable)")
@click.option("--protocols", multiple=True, help="Specify protocols (repeatable)")
@click.option("--has-header", is_flag=True, default=False, help="Add header")
@click.option("--project", "-p", default=None, help="Specify project name for header")
@click.option("--author", "-a", default=None, help="Specify author name for header")
@click.option("--company", "-c", default=None, help="Specify company name for header")
@click.option("--namespace", "-n", default=None, help="Specify a namespace prefix")
@click.option("--verbose", "-v", count=True, help="Specify verbosity level (eg. -vv = Level 2)")
def json_schema_to_swift(
    source,
    output_dir,
    template,
    config,
    use_struct,
    enable_extends,
    deep_types,
    inherits,
    protocols,
    has_header,
    project,
    author,
    company,
    namespace,
    verbose,
):
    configure_logging(verbose)

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flags override the config file when given
    header = config.header
    if project or author or company:
        header = HeaderConfig(
            project=project or header.project,
            author=author or header.author,
            company=company or header.company,
        )

    config = config.with_overrides(
        namespace=namespace,
        use_struct=use_struct or None,
        enable_extends=enable_extends or None,
        deep_types=deep_types or None,
        inherits=tuple(inherits) or None,
        protocols=tuple(protocols) or None,
        has_header=has_header or None,
        header=header,
    )

    generator = PipelineGenerator(config, template_path=template)
    report = generator.run(source, output_dir)

    for path in report.written:
        click.echo(f"{path} success")
