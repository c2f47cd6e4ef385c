"""Domain layer - packing engine, value objects and errors."""

from .exceptions import (
    CutPlanError,
    InvalidPieceDimensionError,
    InvalidSheetDimensionError,
    PieceExceedsSheetError,
)
from .services import (
    GuillotinePacker,
    PackingResult,
    SheetLayout,
    assign_labels,
    build_packing_result,
    label_for_index,
    pack,
    split_space,
    try_place,
)
from .value_objects import (
    Cut,
    Piece,
    Space,
    Unit,
    fits_in_either_orientation,
    is_valid_dimension,
)

__all__ = [
    # Value objects
    "Cut",
    "Piece",
    "Space",
    "Unit",
    "fits_in_either_orientation",
    "is_valid_dimension",
    # Errors
    "CutPlanError",
    "InvalidPieceDimensionError",
    "InvalidSheetDimensionError",
    "PieceExceedsSheetError",
    # Services
    "GuillotinePacker",
    "PackingResult",
    "SheetLayout",
    "assign_labels",
    "build_packing_result",
    "label_for_index",
    "pack",
    "split_space",
    "try_place",
]
