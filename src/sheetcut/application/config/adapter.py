"""Conversion from validated job files to application DTOs."""

from __future__ import annotations

from sheetcut.application.config.schema import CutPlanConfiguration
from sheetcut.application.dtos import PieceInput, SheetInput
from sheetcut.domain import Unit


def config_to_inputs(
    config: CutPlanConfiguration,
) -> tuple[SheetInput, list[PieceInput], Unit]:
    """Convert a job file into the inputs of CalculateCutsCommand.

    Args:
        config: Validated job file.

    Returns:
        Tuple of (sheet input, piece inputs in file order, display unit).
    """
    sheet = SheetInput(width=config.sheet.width, height=config.sheet.height)
    pieces = [
        PieceInput(width=p.width, height=p.height, quantity=p.quantity)
        for p in config.pieces
    ]
    return sheet, pieces, config.unit
