"""Typer CLI for sheet cut planning."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from sheetcut.application import (
    CalculateCutsCommand,
    CutPlanOutput,
    PieceInput,
    SheetInput,
)
from sheetcut.application.config import (
    ConfigError,
    CutPlanConfiguration,
    OutputFormat,
    config_to_inputs,
    load_config,
)
from sheetcut.cli.commands import validate_command
from sheetcut.domain import Unit
from sheetcut.infrastructure import (
    MIN_ASCII_WIDTH,
    CutDiagramRenderer,
    CutTableFormatter,
    InstructionsFormatter,
    JsonExporter,
)
from sheetcut.infrastructure.exporters import ExportError, ExporterRegistry, ExportManager

app = typer.Typer(
    name="sheetcut",
    help="Plan guillotine cuts of rectangular pieces from stock sheets.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log placement decisions to stderr"),
    ] = False,
) -> None:
    """Plan guillotine cuts of rectangular pieces from stock sheets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def parse_dimensions(text: str) -> tuple[float, float]:
    """Parse ``WIDTHxHEIGHT`` into a (width, height) tuple.

    Examples:
        >>> parse_dimensions("100x50")
        (100.0, 50.0)
        >>> parse_dimensions("2.5X4")
        (2.5, 4.0)

    Raises:
        typer.BadParameter: If the text is not two numbers separated by 'x'.
    """
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise typer.BadParameter(f"Expected WIDTHxHEIGHT, got '{text}'")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise typer.BadParameter(f"Expected WIDTHxHEIGHT, got '{text}'") from None


def parse_piece(text: str) -> PieceInput:
    """Parse ``WIDTHxHEIGHT[:QUANTITY]`` into a PieceInput.

    Examples:
        >>> parse_piece("30x20:2")
        PieceInput(width=30.0, height=20.0, quantity=2)
    """
    dims, _, quantity = text.partition(":")
    width, height = parse_dimensions(dims)
    if not quantity:
        return PieceInput(width=width, height=height)
    try:
        return PieceInput(width=width, height=height, quantity=int(quantity))
    except ValueError:
        raise typer.BadParameter(f"Invalid quantity in '{text}'") from None


def _resolve_inputs(
    config_file: Path | None,
    sheet: str | None,
    pieces: list[str] | None,
    unit: Unit | None,
) -> tuple[SheetInput, list[PieceInput], Unit, CutPlanConfiguration | None]:
    """Combine a job file with CLI options.

    CLI options override the job file: ``--sheet`` replaces the sheet,
    ``--piece`` replaces the whole piece list, ``--unit`` replaces the unit.

    Returns:
        Tuple of (sheet input, piece inputs, unit, loaded job file or None).
    """
    config: CutPlanConfiguration | None = None
    sheet_input: SheetInput | None = None
    piece_inputs: list[PieceInput] = []
    resolved_unit = Unit.CM

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        sheet_input, piece_inputs, resolved_unit = config_to_inputs(config)

    try:
        if sheet is not None:
            width, height = parse_dimensions(sheet)
            sheet_input = SheetInput(width=width, height=height)
        if pieces:
            piece_inputs = [parse_piece(p) for p in pieces]
    except typer.BadParameter as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if unit is not None:
        resolved_unit = unit

    if sheet_input is None or not piece_inputs:
        typer.echo(
            "Error: --sheet and at least one --piece are required when --config is not provided",
            err=True,
        )
        raise typer.Exit(code=1)

    return sheet_input, piece_inputs, resolved_unit, config


def _calculate(
    sheet_input: SheetInput, piece_inputs: list[PieceInput], unit: Unit
) -> CutPlanOutput:
    result = CalculateCutsCommand().execute(sheet_input, piece_inputs, unit)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


def _handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: CutPlanOutput,
    svg_options: dict,
) -> None:
    """Handle multi-format export via --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        result: The computed plan to export.
        svg_options: Display region options for the SVG exporter.
    """
    if output_formats_str.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."), exporter_options={"svg": svg_options})
    try:
        files = manager.export_all(formats, result, project_name)
    except (ExportError, OSError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, paths in files.items():
        for path in paths:
            typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def plan(
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    sheet: Annotated[
        Optional[str],
        typer.Option("--sheet", "-s", help="Sheet size as WIDTHxHEIGHT"),
    ] = None,
    pieces: Annotated[
        Optional[list[str]],
        typer.Option("--piece", "-p", help="Piece as WIDTHxHEIGHT[:QUANTITY]; repeatable"),
    ] = None,
    unit: Annotated[
        Optional[Unit],
        typer.Option("--unit", "-u", help="Display unit: cm, in, mm"),
    ] = None,
    output_format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format: instructions, table, json, ascii"),
    ] = None,
    output_formats: Annotated[
        Optional[str],
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (json, svg, txt) or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", help="Directory for exported files"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = "cutplan",
) -> None:
    """Compute a cut plan and print it.

    Examples:
        sheetcut plan --sheet 100x100 --piece 60x40 --piece 30x20:2
        sheetcut plan --config shelves.json --format table
        sheetcut plan --config shelves.json --output-formats all --output-dir ./out
    """
    sheet_input, piece_inputs, resolved_unit, config = _resolve_inputs(
        config_file, sheet, pieces, unit
    )

    svg_options: dict = {}
    if config is not None:
        svg_options = config.output.svg.model_dump()
    if output_format is None:
        output_format = config.output.format if config else OutputFormat.INSTRUCTIONS

    result = _calculate(sheet_input, piece_inputs, resolved_unit)

    if output_formats:
        _handle_multi_format_export(
            output_formats, output_dir, project_name, result, svg_options
        )
        return

    if output_format == OutputFormat.JSON:
        typer.echo(JsonExporter().export(result))
    elif output_format == OutputFormat.TABLE:
        typer.echo(CutTableFormatter(resolved_unit).format(result.result))
    elif output_format == OutputFormat.ASCII:
        typer.echo(CutDiagramRenderer().render_all_ascii(result.result))
    else:
        typer.echo(InstructionsFormatter(resolved_unit).format(result.cuts))
        typer.echo()
        typer.echo(CutDiagramRenderer().render_waste_summary(result.result))


@app.command()
def diagram(
    sheet: Annotated[str, typer.Option("--sheet", "-s", help="Sheet size as WIDTHxHEIGHT")],
    pieces: Annotated[
        list[str],
        typer.Option("--piece", "-p", help="Piece as WIDTHxHEIGHT[:QUANTITY]; repeatable"),
    ],
    width: Annotated[
        int,
        typer.Option(
            "--width", "-w", min=MIN_ASCII_WIDTH, help="Diagram width in characters"
        ),
    ] = 80,
) -> None:
    """Show ASCII diagrams of every sheet in the plan."""
    sheet_input, piece_inputs, unit, _ = _resolve_inputs(None, sheet, pieces, None)
    result = _calculate(sheet_input, piece_inputs, unit)
    typer.echo(CutDiagramRenderer().render_all_ascii(result.result, width=width))


if __name__ == "__main__":
    app()
