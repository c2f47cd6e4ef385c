"""Exceptions raised by the packing engine.

All errors derive from CutPlanError, which is itself a ValueError so callers
that only care about "bad input" can catch the builtin type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects import Piece

__all__ = [
    "CutPlanError",
    "InvalidPieceDimensionError",
    "InvalidSheetDimensionError",
    "PieceExceedsSheetError",
]


class CutPlanError(ValueError):
    """Base class for cut planning failures."""

    error_type = "cut_plan"


class InvalidPieceDimensionError(CutPlanError):
    """Raised when a piece has a non-positive width or height."""

    error_type = "invalid_piece_dimension"

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Piece dimensions must be positive (got {width:g} x {height:g})"
        )


class InvalidSheetDimensionError(CutPlanError):
    """Raised when the sheet width or height is non-positive."""

    error_type = "invalid_sheet_dimension"

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Sheet dimensions must be positive (got {width:g} x {height:g})"
        )


class PieceExceedsSheetError(CutPlanError):
    """Raised when a piece cannot fit on an empty sheet in either orientation.

    Attributes:
        piece: The offending piece.
        sheet_width: Width of the sheet it was packed against.
        sheet_height: Height of the sheet it was packed against.
    """

    error_type = "piece_exceeds_sheet"

    def __init__(self, piece: Piece, sheet_width: float, sheet_height: float) -> None:
        self.piece = piece
        self.sheet_width = sheet_width
        self.sheet_height = sheet_height
        super().__init__(
            f"Piece {piece.id} ({piece.width:g}x{piece.height:g}) "
            f"exceeds sheet ({sheet_width:g}x{sheet_height:g}) in every orientation"
        )
