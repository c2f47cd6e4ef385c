"""Validate command for checking job files.

This module provides the `validate` command that checks a JSON job file for
syntax and schema errors, and reports pieces that cannot fit the sheet.
"""

from pathlib import Path
from typing import Annotated

import typer

from sheetcut.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a cut plan job file.

    Checks the job file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, non-positive sizes, etc.)
    - Pieces that exceed the sheet in both orientations

    Exit codes:
        0 - Job file is valid
        1 - Job file has errors (cannot be planned)

    Example:
        sheetcut validate shelves.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    if result.is_valid:
        total = sum(p.quantity for p in config.pieces)
        typer.echo(
            f"Sheet: {config.sheet.width:g} x {config.sheet.height:g} {config.unit.value}, "
            f"{total} piece(s)"
        )

    raise typer.Exit(code=result.exit_code)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()
        typer.echo(f"Validation failed: {len(result.errors)} error(s)", err=True)
    else:
        typer.echo("Validation passed. Job file is valid.")


def _display_load_error(error: ConfigError) -> None:
    """Display a job file loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
