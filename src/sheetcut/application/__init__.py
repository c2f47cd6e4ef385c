"""Application layer - use cases and DTOs."""

from .commands import CalculateCutsCommand
from .cut_list import CutList
from .dtos import CutPlanOutput, PieceInput, SheetInput

__all__ = [
    "CalculateCutsCommand",
    "CutList",
    "CutPlanOutput",
    "PieceInput",
    "SheetInput",
]
