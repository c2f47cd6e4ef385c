"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from sheetcut.domain import Cut, PackingResult, Unit, is_valid_dimension


@dataclass
class SheetInput:
    """Input DTO for stock sheet dimensions."""

    width: float
    height: float

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not is_valid_dimension(self.width):
            errors.append("Sheet width must be a positive finite number")
        if not is_valid_dimension(self.height):
            errors.append("Sheet height must be a positive finite number")
        return errors


@dataclass
class PieceInput:
    """Input DTO for one requested piece (possibly repeated)."""

    width: float
    height: float
    quantity: int = 1

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not (is_valid_dimension(self.width) and is_valid_dimension(self.height)):
            errors.append(
                "Piece dimensions must be positive finite numbers "
                f"(got {self.width:g} x {self.height:g})"
            )
        if self.quantity < 1:
            errors.append("Quantity must be at least 1")
        return errors


@dataclass
class CutPlanOutput:
    """Output DTO containing a computed cut plan.

    Attributes:
        cuts: Labeled cuts in placement order. Empty when the run failed.
        result: Cuts grouped by sheet, or None when the run failed.
        unit: Display unit for all dimensions.
        errors: Error messages if planning failed.
    """

    cuts: tuple[Cut, ...] = ()
    result: PackingResult | None = None
    unit: Unit = Unit.CM
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the plan was computed successfully."""
        return len(self.errors) == 0
