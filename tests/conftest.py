"""Pytest configuration and shared fixtures for cut planning tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sheetcut.application import CalculateCutsCommand, CutPlanOutput, PieceInput, SheetInput
from sheetcut.domain import Unit

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def calculate_command() -> CalculateCutsCommand:
    """Create a CalculateCutsCommand instance."""
    return CalculateCutsCommand()


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON job file fixtures."""
    return FIXTURES_PATH


# =============================================================================
# Shared plan fixtures
# =============================================================================


@pytest.fixture
def single_sheet_output(calculate_command: CalculateCutsCommand) -> CutPlanOutput:
    """100x100 sheet with a 60x40 piece and two 30x20 pieces.

    Resulting plan (all on sheet 0):
        A: id 1, 60x40 at (0, 0)
        B: id 2, 30x20 at (60, 0)
        C: id 3, 30x20 at (0, 40)
    """
    return calculate_command.execute(
        SheetInput(width=100, height=100),
        [PieceInput(width=60, height=40), PieceInput(width=30, height=20, quantity=2)],
        Unit.CM,
    )


@pytest.fixture
def two_sheet_output(calculate_command: CalculateCutsCommand) -> CutPlanOutput:
    """10x10 sheet with two 8x8 pieces, one per sheet."""
    return calculate_command.execute(
        SheetInput(width=10, height=10),
        [PieceInput(width=8, height=8, quantity=2)],
        Unit.IN,
    )
