"""Tests for the GuillotinePacker multi-sheet packing driver.

Tests cover:
- Single and multi-sheet placement
- Rotation when only the turned orientation fits
- Area-descending placement order with stable ties
- Fail-fast on pieces larger than the sheet
- Sheet dimension validation
"""

from __future__ import annotations

import pytest

from sheetcut.domain import (
    GuillotinePacker,
    InvalidSheetDimensionError,
    Piece,
    PieceExceedsSheetError,
    pack,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def packer() -> GuillotinePacker:
    """Packer for 10x10 sheets."""
    return GuillotinePacker(10, 10)


# =============================================================================
# Construction
# =============================================================================


class TestPackerConstruction:
    """Tests for GuillotinePacker initialization."""

    def test_stores_sheet_dimensions(self) -> None:
        packer = GuillotinePacker(100, 50)
        assert packer.sheet_width == 100
        assert packer.sheet_height == 50

    @pytest.mark.parametrize(
        "width,height",
        [
            (0, 10),
            (10, 0),
            (-5, 10),
            (float("nan"), 10),
            (10, float("nan")),
            (float("inf"), 10),
        ],
    )
    def test_invalid_sheet_rejected(self, width: float, height: float) -> None:
        with pytest.raises(InvalidSheetDimensionError):
            GuillotinePacker(width, height)


# =============================================================================
# Placement scenarios
# =============================================================================


class TestPackingScenarios:
    """End-to-end packing scenarios."""

    def test_single_piece(self) -> None:
        cuts = pack([Piece(width=60, height=40, id=1)], 100, 100)

        assert len(cuts) == 1
        cut = cuts[0]
        assert (cut.x, cut.y, cut.sheet) == (0, 0, 0)
        assert (cut.width, cut.height) == (60, 40)
        assert cut.rotated is False
        assert cut.label == "A"

    def test_second_sheet_opened_when_residuals_too_small(
        self, packer: GuillotinePacker
    ) -> None:
        """Residuals of the first 8x8 are 2x8 and 10x2; neither admits another 8x8."""
        cuts = packer.pack([Piece(width=8, height=8, id=1), Piece(width=8, height=8, id=2)])

        assert len(cuts) == 2
        first, second = cuts
        assert (first.x, first.y, first.sheet) == (0, 0, 0)
        assert (second.x, second.y, second.sheet) == (0, 0, 1)
        assert second.label == "B"

    def test_rotated_placement(self) -> None:
        cuts = pack([Piece(width=8, height=3, id=1)], 5, 10)

        cut = cuts[0]
        assert cut.rotated is True
        assert (cut.width, cut.height) == (3, 8)
        assert (cut.x, cut.y) == (0, 0)

    def test_oversized_piece_fails_with_no_cuts(self, packer: GuillotinePacker) -> None:
        with pytest.raises(PieceExceedsSheetError) as exc_info:
            packer.pack([Piece(width=20, height=20, id=1)])

        assert exc_info.value.piece.id == 1
        assert exc_info.value.sheet_width == 10
        assert "exceeds sheet" in str(exc_info.value)

    def test_oversized_piece_detected_before_any_placement(
        self, packer: GuillotinePacker
    ) -> None:
        """A valid piece ahead of an oversized one does not produce partial output."""
        pieces = [Piece(width=2, height=2, id=1), Piece(width=11, height=1, id=2)]

        with pytest.raises(PieceExceedsSheetError) as exc_info:
            packer.pack(pieces)
        assert exc_info.value.piece.id == 2

    def test_area_descending_order_with_labels(self, packer: GuillotinePacker) -> None:
        """Pieces inserted as areas 20, 50, 30 are placed 50, 30, 20."""
        pieces = [
            Piece(width=4, height=5, id=1),
            Piece(width=5, height=10, id=2),
            Piece(width=3, height=10, id=3),
        ]
        cuts = packer.pack(pieces)

        assert [c.id for c in cuts] == [2, 3, 1]
        assert [c.area for c in cuts] == [50, 30, 20]
        assert [c.label for c in cuts] == ["A", "B", "C"]

    def test_first_fit_uses_right_residual(self) -> None:
        cuts = pack(
            [Piece(width=60, height=40, id=1), Piece(width=30, height=20, id=2)],
            100,
            100,
        )

        assert (cuts[1].x, cuts[1].y, cuts[1].sheet) == (60, 0, 0)

    def test_first_fit_scans_in_insertion_order(self) -> None:
        """After A and B, the full-width bottom residual comes before B's residuals."""
        cuts = pack(
            [
                Piece(width=60, height=40, id=1),
                Piece(width=30, height=20, id=2),
                Piece(width=30, height=20, id=3),
            ],
            100,
            100,
        )

        assert (cuts[2].x, cuts[2].y) == (0, 40)

    def test_equal_areas_keep_insertion_order(self) -> None:
        pieces = [
            Piece(width=20, height=5, id=1),
            Piece(width=10, height=10, id=2),
            Piece(width=5, height=20, id=3),
        ]
        cuts = pack(pieces, 100, 100)

        assert [c.id for c in cuts] == [1, 2, 3]

    def test_empty_input(self, packer: GuillotinePacker) -> None:
        assert packer.pack([]) == ()

    def test_exact_sheet_size_piece(self, packer: GuillotinePacker) -> None:
        cuts = packer.pack([Piece(width=10, height=10, id=1), Piece(width=10, height=10, id=2)])

        assert [c.sheet for c in cuts] == [0, 1]

    def test_new_sheet_indices_increase_when_sheets_fill_up(
        self, packer: GuillotinePacker
    ) -> None:
        """Sheets consumed exactly still get distinct, increasing indices."""
        pieces = [Piece(width=10, height=10, id=i) for i in range(1, 5)]
        cuts = packer.pack(pieces)

        assert [c.sheet for c in cuts] == [0, 1, 2, 3]

    def test_later_piece_backfills_earlier_sheet(self, packer: GuillotinePacker) -> None:
        pieces = [
            Piece(width=8, height=8, id=1),
            Piece(width=8, height=8, id=2),
            Piece(width=2, height=8, id=3),
        ]
        cuts = packer.pack(pieces)

        small = next(c for c in cuts if c.id == 3)
        assert small.sheet == 0
        assert (small.x, small.y) == (8, 0)


# =============================================================================
# Determinism and reuse
# =============================================================================


class TestPackerReuse:
    """A packer holds no state between runs."""

    def test_repeated_runs_are_identical(self, packer: GuillotinePacker) -> None:
        sizes = [(3, 4), (5, 2), (7, 7), (1, 9), (6, 3)]
        pieces = [Piece(width=w, height=h, id=i) for i, (w, h) in enumerate(sizes, start=1)]

        assert packer.pack(pieces) == packer.pack(pieces)

    def test_input_not_mutated(self, packer: GuillotinePacker) -> None:
        pieces = [Piece(width=2, height=2, id=1), Piece(width=5, height=5, id=2)]
        before = list(pieces)
        packer.pack(pieces)

        assert pieces == before
