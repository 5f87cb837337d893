"""CLI entry point for mvc-api-docs."""

import logging
from pathlib import Path

import click

from mvc_api_docs.builder import DocumentationBuilder
from mvc_api_docs.config import DocumentationConfiguration
from mvc_api_docs.errors import ApiDocError, StrictModeError
from mvc_api_docs.model.base import Documentation
from mvc_api_docs.output import FORMATS, render_documentation
from mvc_api_docs.source import load_source


class _WarningCollector(logging.Handler):
    """Collects warnings logged by the readers while documentation is built."""

    def __init__(self):
        super().__init__(level=logging.WARNING)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def _build(source: Path, configuration: DocumentationConfiguration, strict: bool) -> Documentation:
    """Load controllers from ``source`` and build their documentation."""
    module = load_source(source)
    builder = DocumentationBuilder(configuration)

    collector = _WarningCollector()
    package_logger = logging.getLogger("mvc_api_docs")
    previous_level = package_logger.level
    if strict:
        package_logger.setLevel(min(package_logger.getEffectiveLevel(), logging.WARNING))
    package_logger.addHandler(collector)
    try:
        documentation = builder.build_from_module(module)
    finally:
        package_logger.removeHandler(collector)
        package_logger.setLevel(previous_level)

    if strict and collector.messages:
        raise StrictModeError(collector.messages)
    return documentation


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log progress at INFO level.")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """API Docs — document annotated controllers."""
    configuration = DocumentationConfiguration()
    logging.basicConfig(
        level=logging.INFO if verbose else configuration.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = configuration


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the documentation.")
@click.option("--format", "fmt", default="yaml", type=click.Choice(FORMATS), help="Output format.")
@click.option("--strict", is_flag=True, help="Fail if any warning is emitted while reading controllers.")
@click.option("--include-internal", is_flag=True, help="Also document the built-in documentation controller.")
@click.pass_obj
def generate(configuration: DocumentationConfiguration, source: Path, output: Path, fmt: str, strict: bool, include_internal: bool):
    """Generate documentation for the controllers defined in SOURCE."""
    if include_internal:
        configuration = configuration.model_copy(update={"include_internal_resources": True})

    click.echo(f"Reading controllers from {source}...")
    try:
        documentation = _build(source, configuration, strict)
    except ApiDocError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Documented {len(documentation.resources)} resources.")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_documentation(documentation, fmt), encoding="utf-8")
    click.echo(f"Documentation saved to {output}")


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strict", is_flag=True, help="Fail if any warning is emitted while reading controllers.")
@click.pass_obj
def describe(configuration: DocumentationConfiguration, source: Path, strict: bool):
    """List the resources documented for the controllers defined in SOURCE."""
    try:
        documentation = _build(source, configuration, strict)
    except ApiDocError as e:
        raise click.ClickException(str(e)) from e

    for endpoint in documentation.apis:
        click.echo(f"{endpoint.path}\t{endpoint.description or ''}")
