"""Unit tests for Piece, Space and Cut value objects."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from sheetcut.domain import (
    Cut,
    CutPlanError,
    InvalidPieceDimensionError,
    Piece,
    Space,
    Unit,
    fits_in_either_orientation,
    is_valid_dimension,
)


class TestUnit:
    """Tests for the Unit enum."""

    def test_values(self) -> None:
        assert Unit.CM.value == "cm"
        assert Unit.IN.value == "in"
        assert Unit.MM.value == "mm"

    def test_lookup_by_value(self) -> None:
        assert Unit("in") is Unit.IN


class TestPiece:
    """Tests for Piece."""

    def test_valid_piece(self) -> None:
        piece = Piece(width=60, height=40, id=1)
        assert piece.width == 60
        assert piece.height == 40
        assert piece.id == 1
        assert piece.area == 2400

    @pytest.mark.parametrize(
        "width,height",
        [(0, 10), (10, 0), (-1, 10), (10, -5)],
    )
    def test_non_positive_dimension_rejected(self, width: float, height: float) -> None:
        with pytest.raises(InvalidPieceDimensionError):
            Piece(width=width, height=height, id=1)

    @pytest.mark.parametrize(
        "width,height",
        [(float("nan"), 5), (5, float("nan")), (float("inf"), 5), (5, float("-inf"))],
    )
    def test_non_finite_dimension_rejected(self, width: float, height: float) -> None:
        with pytest.raises(InvalidPieceDimensionError):
            Piece(width=width, height=height, id=1)

    def test_dimension_error_is_value_error(self) -> None:
        """Callers can catch bad input as a plain ValueError."""
        with pytest.raises(ValueError):
            Piece(width=0, height=10, id=1)
        assert issubclass(InvalidPieceDimensionError, CutPlanError)

    def test_is_immutable(self) -> None:
        piece = Piece(width=10, height=10, id=1)
        with pytest.raises(FrozenInstanceError):
            piece.width = 20  # type: ignore[misc]

    def test_fits_within_unrotated(self) -> None:
        assert Piece(width=8, height=3, id=1).fits_within(10, 5)

    def test_fits_within_rotated_only(self) -> None:
        assert Piece(width=8, height=3, id=1).fits_within(5, 10)

    def test_does_not_fit(self) -> None:
        assert not Piece(width=20, height=20, id=1).fits_within(10, 10)


class TestDimensionHelpers:
    """Tests for the shared dimension checks."""

    @pytest.mark.parametrize("value", [1, 0.5, 1e9])
    def test_valid_dimension(self, value: float) -> None:
        assert is_valid_dimension(value)

    @pytest.mark.parametrize("value", [0, -1, float("nan"), float("inf"), float("-inf")])
    def test_invalid_dimension(self, value: float) -> None:
        assert not is_valid_dimension(value)

    def test_fits_in_either_orientation(self) -> None:
        assert fits_in_either_orientation(8, 3, 10, 5)
        assert fits_in_either_orientation(8, 3, 5, 10)
        assert not fits_in_either_orientation(8, 8, 10, 5)


class TestSpace:
    """Tests for Space."""

    def test_full_sheet(self) -> None:
        space = Space.full_sheet(100, 50, 2)
        assert (space.x, space.y) == (0, 0)
        assert (space.width, space.height) == (100, 50)
        assert space.sheet == 2
        assert space.area == 5000

    def test_zero_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            Space(x=0, y=0, width=0, height=10, sheet=0)

    def test_negative_coordinate_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Space(x=-1, y=0, width=5, height=5, sheet=0)

    def test_negative_sheet_rejected(self) -> None:
        with pytest.raises(ValueError, match="Sheet index"):
            Space(x=0, y=0, width=5, height=5, sheet=-1)


class TestCut:
    """Tests for Cut."""

    def test_edges_and_area(self) -> None:
        cut = Cut(id=1, width=30, height=20, x=60, y=10, sheet=0)
        assert cut.right_edge == 90
        assert cut.bottom_edge == 30
        assert cut.area == 600

    def test_defaults(self) -> None:
        cut = Cut(id=1, width=30, height=20, x=0, y=0, sheet=0)
        assert cut.rotated is False
        assert cut.label == ""

    def test_original_dimensions_when_rotated(self) -> None:
        cut = Cut(id=1, width=3, height=8, x=0, y=0, sheet=0, rotated=True)
        assert cut.original_width == 8
        assert cut.original_height == 3

    def test_original_dimensions_when_not_rotated(self) -> None:
        cut = Cut(id=1, width=3, height=8, x=0, y=0, sheet=0)
        assert cut.original_width == 3
        assert cut.original_height == 8

    def test_invalid_dimensions_rejected(self) -> None:
        with pytest.raises(ValueError):
            Cut(id=1, width=0, height=8, x=0, y=0, sheet=0)

    def test_overlapping_cuts(self) -> None:
        a = Cut(id=1, width=10, height=10, x=0, y=0, sheet=0)
        b = Cut(id=2, width=10, height=10, x=5, y=5, sheet=0)
        assert a.overlaps(b)
        assert b.overlaps(a)

    def test_touching_cuts_do_not_overlap(self) -> None:
        a = Cut(id=1, width=10, height=10, x=0, y=0, sheet=0)
        b = Cut(id=2, width=10, height=10, x=10, y=0, sheet=0)
        assert not a.overlaps(b)

    def test_cuts_on_different_sheets_do_not_overlap(self) -> None:
        a = Cut(id=1, width=10, height=10, x=0, y=0, sheet=0)
        b = Cut(id=2, width=10, height=10, x=0, y=0, sheet=1)
        assert not a.overlaps(b)
