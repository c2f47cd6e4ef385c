"""Geometry value objects for the packing engine.

All dataclasses are frozen (immutable) so cut plans can be shared freely
once a packing run has produced them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidPieceDimensionError


def is_valid_dimension(value: float) -> bool:
    """Check that a dimension is a finite number greater than zero.

    NaN and infinity are rejected along with zero and negative values.
    """
    return math.isfinite(value) and value > 0


def fits_in_either_orientation(
    width: float, height: float, box_width: float, box_height: float
) -> bool:
    """Check whether a width x height rectangle fits a box as given or turned 90 degrees."""
    return (width <= box_width and height <= box_height) or (
        height <= box_width and width <= box_height
    )


class Unit(str, Enum):
    """Display unit carried alongside dimensions.

    The packing engine itself is unit-agnostic.
    """

    CM = "cm"
    IN = "in"
    MM = "mm"


@dataclass(frozen=True)
class Piece:
    """A rectangular piece requested by the caller.

    Attributes:
        width: Piece width.
        height: Piece height.
        id: Caller-assigned identity, unique within one cut list.
    """

    width: float
    height: float
    id: int

    def __post_init__(self) -> None:
        if not (is_valid_dimension(self.width) and is_valid_dimension(self.height)):
            raise InvalidPieceDimensionError(self.width, self.height)

    @property
    def area(self) -> float:
        """Area of the piece."""
        return self.width * self.height

    def fits_within(self, width: float, height: float) -> bool:
        """Check whether the piece fits a width x height box in either orientation."""
        return fits_in_either_orientation(self.width, self.height, width, height)


@dataclass(frozen=True)
class Space:
    """A free rectangle on a sheet, available for placement.

    Coordinates are measured from the top-left corner of the sheet.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Free width (always positive).
        height: Free height (always positive).
        sheet: Zero-based sheet index.
    """

    x: float
    y: float
    width: float
    height: float
    sheet: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Space coordinates must be non-negative")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Space dimensions must be positive")
        if self.sheet < 0:
            raise ValueError("Sheet index must be non-negative")

    @classmethod
    def full_sheet(cls, width: float, height: float, sheet: int) -> Space:
        """Create a space covering an entire empty sheet."""
        return cls(x=0.0, y=0.0, width=width, height=height, sheet=sheet)

    @property
    def area(self) -> float:
        """Area of the free rectangle."""
        return self.width * self.height


@dataclass(frozen=True)
class Cut:
    """A piece placed on a sheet.

    Width and height are the as-placed dimensions, so they are swapped
    relative to the source piece when ``rotated`` is True.

    Attributes:
        id: Identity inherited from the source piece.
        width: Placed width.
        height: Placed height.
        x: Left edge on the sheet.
        y: Top edge on the sheet.
        sheet: Zero-based sheet index.
        rotated: True if the piece was turned 90 degrees to fit.
        label: Positional label assigned after packing.
    """

    id: int
    width: float
    height: float
    x: float
    y: float
    sheet: int
    rotated: bool = False
    label: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Cut dimensions must be positive")
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")
        if self.sheet < 0:
            raise ValueError("Sheet index must be non-negative")

    @property
    def right_edge(self) -> float:
        """X coordinate of the cut's right edge."""
        return self.x + self.width

    @property
    def bottom_edge(self) -> float:
        """Y coordinate of the cut's bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> float:
        """Area of the placed piece."""
        return self.width * self.height

    @property
    def original_width(self) -> float:
        """Width of the source piece before rotation."""
        return self.height if self.rotated else self.width

    @property
    def original_height(self) -> float:
        """Height of the source piece before rotation."""
        return self.width if self.rotated else self.height

    def overlaps(self, other: Cut) -> bool:
        """Check for a positive-area intersection with another cut on the same sheet."""
        if self.sheet != other.sheet:
            return False
        return (
            self.x < other.right_edge
            and other.x < self.right_edge
            and self.y < other.bottom_edge
            and other.y < self.bottom_edge
        )
