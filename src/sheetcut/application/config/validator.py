"""Semantic checks on job files that the schema alone cannot express."""

from __future__ import annotations

from dataclasses import dataclass, field

from sheetcut.application.config.schema import CutPlanConfiguration
from sheetcut.domain import fits_in_either_orientation


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found in a job file.

    Attributes:
        path: JSON path of the offending field (e.g., "pieces[2]").
        message: Human readable description.
    """

    path: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating a job file."""

    errors: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 when valid, 1 otherwise."""
        return 0 if self.is_valid else 1


def validate_config(config: CutPlanConfiguration) -> ValidationResult:
    """Check that every piece fits the sheet in at least one orientation.

    Args:
        config: A job file that already passed schema validation.

    Returns:
        ValidationResult with one error per oversized piece entry.
    """
    sheet_w, sheet_h = config.sheet.width, config.sheet.height
    result = ValidationResult()
    for i, piece in enumerate(config.pieces):
        if not fits_in_either_orientation(piece.width, piece.height, sheet_w, sheet_h):
            result.errors.append(
                ValidationIssue(
                    path=f"pieces[{i}]",
                    message=(
                        f"{piece.width:g}x{piece.height:g} exceeds sheet "
                        f"({sheet_w:g}x{sheet_h:g}) in every orientation"
                    ),
                )
            )
    return result
