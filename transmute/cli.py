"""Command-line interface for Transmute.

Provides a thin wrapper around the Transmute API for command-line usage.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="transmute",
    help="Transmute - convert structured text between JSON, XML, CSV and YAML",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    """Route debug logging to stderr through rich when --verbose is given."""
    if not verbose:
        return

    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_input(source: str) -> str:
    """Read input text from a file path, or from stdin when the path is '-'."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {escape(source)}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _resolve_source_format(source: str, text: str, hint: str | None) -> str:
    """Pick the source format from a hint, the file extension, or the content."""
    from transmute.core.exceptions import FormatDetectionError
    from transmute.formats.registry import FormatRegistry

    if hint:
        return hint

    if source != "-":
        by_extension = FormatRegistry.format_for_path(source)
        if by_extension is not None:
            return by_extension.value

    try:
        return FormatRegistry.detect_format(text).value
    except FormatDetectionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}. Use --from to set the format.")
        raise typer.Exit(1)


@app.command("convert")
def convert_cmd(
    source: str = typer.Argument(..., help="Input file, or '-' to read from stdin"),
    target_format: str | None = typer.Option(
        None, "--to", "-t", help="Target format: json, xml, csv, yaml"
    ),
    source_format: str | None = typer.Option(
        None, "--from", "-f", help="Source format (detected if not provided)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file (print to stdout if not specified)"
    ),
    compact: bool = typer.Option(
        False, "--compact", "-c", help="Emit compact JSON/XML instead of pretty-printing"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", help="YAML config file for conversion settings"
    ),
    max_depth: int | None = typer.Option(
        None, "--max-depth", help="Maximum nesting depth accepted"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Convert a document from one format to another.

    Examples:
        transmute convert data.json --to yaml
        transmute convert table.csv --to json --compact
        transmute convert feed.xml --to json --output feed.json
        cat data.yaml | transmute convert - --from yaml --to xml
        transmute convert data.json --config conversion.yaml
    """
    from transmute.config.models import ConversionConfig
    from transmute.convert import Converter
    from transmute.core.exceptions import ConversionError

    _configure_logging(verbose)

    # Load config from YAML file if provided
    if config_file:
        if not config_file.exists():
            console.print(f"[red]Error:[/red] Config file not found: {config_file}")
            raise typer.Exit(1)
        try:
            config = ConversionConfig.from_yaml(config_file)
        except Exception as e:
            console.print(f"[red]Error loading config:[/red] {escape(str(e))}")
            raise typer.Exit(1)
    else:
        config = ConversionConfig()

    # CLI arguments override config file settings
    if target_format:
        config.target_format = target_format
    if source_format:
        config.source_format = source_format
    if compact:
        config.pretty_print = False
    if max_depth is not None:
        if max_depth < 1:
            console.print("[red]Error:[/red] --max-depth must be >= 1")
            raise typer.Exit(1)
        config.max_depth = max_depth

    if not config.target_format:
        console.print("[red]Error:[/red] Target format is required (use --to)")
        raise typer.Exit(1)

    text = _read_input(source)
    resolved_source = _resolve_source_format(source, text, config.source_format)

    try:
        result = Converter(config).convert(text, resolved_source, config.target_format)
    except ConversionError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    if output:
        output.write_text(result, encoding="utf-8")
        console.print(
            f"[green]Converted[/green] {resolved_source} -> {config.target_format}: {output}"
        )
    else:
        typer.echo(result)


@app.command("validate")
def validate_cmd(
    source: str = typer.Argument(..., help="Input file, or '-' to read from stdin"),
    format: str | None = typer.Option(
        None, "--format", "-f", help="Format to validate against (detected if not provided)"
    ),
) -> None:
    """Check that a document is well-formed in its format.

    Examples:
        transmute validate data.json
        transmute validate settings.txt --format yaml
    """
    from transmute.convert import Converter

    text = _read_input(source)
    resolved = _resolve_source_format(source, text, format)

    result = Converter().validate(text, resolved)
    if result.valid:
        console.print(f"[green]{result.message}[/green]")
        return

    console.print(f"[red]{escape(result.message)}[/red]")
    raise typer.Exit(1)


@app.command("formats")
def formats_cmd() -> None:
    """List supported formats."""
    from transmute.formats import DataFormat, FormatRegistry

    table = Table(title="Supported Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Decode", justify="center")
    table.add_column("Encode", justify="center")
    table.add_column("Extensions")

    for name, caps in FormatRegistry.list_formats().items():
        decode = "[green]✓[/green]" if caps["can_decode"] else "[dim]-[/dim]"
        encode = "[green]✓[/green]" if caps["can_encode"] else "[dim]-[/dim]"
        extensions = ", ".join(FormatRegistry.extensions_for(DataFormat(name)))
        table.add_row(name, decode, encode, extensions)

    console.print()
    console.print(table)


@app.command("version")
def version_cmd() -> None:
    """Show Transmute version."""
    from transmute import __version__

    console.print(f"Transmute v{__version__}")


@app.callback()
def main() -> None:
    """Transmute - convert structured text between formats.

    Decode JSON, XML, CSV or YAML into one value tree and encode it into any
    of the others.
    """
    pass


if __name__ == "__main__":
    app()
