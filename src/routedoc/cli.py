"""
Command-line interface for rendering documented routes.
"""

import importlib
import logging
from pathlib import Path
from typing import Optional

import typer

from .document import ApiDocument
from .exceptions import TargetLoadError
from .formats import FormatType

app = typer.Typer(help="Render route documentation as OpenAPI")


def _load_document(target: str) -> ApiDocument:
    """Load an ApiDocument from a module:attribute reference.

    Args:
        target: Reference such as "myapp.docs:document". The attribute may be
            an ApiDocument or a callable returning one.

    Returns:
        The loaded document

    Raises:
        TargetLoadError: If the target cannot be imported or is not a document
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise TargetLoadError(f"Target must look like module:attribute, got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetLoadError(f"Could not import {module_name}: {e}")

    try:
        obj = getattr(module, attribute)
    except AttributeError:
        raise TargetLoadError(f"{module_name} has no attribute {attribute}")

    if not isinstance(obj, ApiDocument) and callable(obj):
        try:
            obj = obj()
        except Exception as e:
            raise TargetLoadError(f"Calling {target} failed: {e}")
    if not isinstance(obj, ApiDocument):
        raise TargetLoadError(f"{target} is not an ApiDocument")
    return obj


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Render route documentation as OpenAPI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def render(
    target: str = typer.Argument(..., help="Document reference as module:attribute"),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Path to save the rendered document. Printed to stdout if not provided",
    ),
    output_format: str = typer.Option(
        "yaml", "--format", "-f", help="Output format: yaml or json"
    ),
) -> None:
    """Render an ApiDocument to YAML or JSON."""
    if output_format not in ("yaml", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(1)

    try:
        document = _load_document(target)
    except TargetLoadError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(1)

    text = document.to_yaml() if output_format == "yaml" else document.to_json()

    if output_file is None:
        typer.echo(text)
        return

    try:
        output_file.write_text(text)
    except OSError as e:
        typer.echo(f"Error saving to {output_file}: {str(e)}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Successfully rendered {target} to {output_file}")


@app.command()
def formats() -> None:
    """List the native types and the schema type and format they map to."""
    for member in FormatType:
        fmt = member.format or "-"
        typer.echo(
            f"{member.name:<8} {member.native_type.__name__:<8} {member.type_name:<8} {fmt}"
        )


def main():
    """Entry point for the CLI."""
    app()
