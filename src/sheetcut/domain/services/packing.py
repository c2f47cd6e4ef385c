"""Multi-sheet guillotine packing driver.

Pieces are packed largest-first into free spaces using a first-fit scan
over spaces in insertion order. Every placement splits the consumed space
into a right residual (capped at the piece height) and a full-width bottom
residual. When no free space admits a piece, a fresh sheet is opened.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..exceptions import InvalidSheetDimensionError, PieceExceedsSheetError
from ..value_objects import Cut, Piece, Space, is_valid_dimension
from .labeling import assign_labels
from .partitioning import split_space
from .placement import try_place

logger = logging.getLogger(__name__)

__all__ = ["GuillotinePacker", "pack"]


class GuillotinePacker:
    """First-fit decreasing packer over guillotine-split free spaces.

    A packer holds only the sheet dimensions; every call to ``pack`` starts
    from a fresh working set, so one instance can be reused and shared.

    Attributes:
        sheet_width: Width of every sheet.
        sheet_height: Height of every sheet.
    """

    def __init__(self, sheet_width: float, sheet_height: float) -> None:
        """Initialize the packer.

        Args:
            sheet_width: Width of the stock sheet.
            sheet_height: Height of the stock sheet.

        Raises:
            InvalidSheetDimensionError: If either dimension is not a finite
                positive number.
        """
        if not (is_valid_dimension(sheet_width) and is_valid_dimension(sheet_height)):
            raise InvalidSheetDimensionError(sheet_width, sheet_height)
        self.sheet_width = sheet_width
        self.sheet_height = sheet_height

    def pack(self, pieces: Sequence[Piece]) -> tuple[Cut, ...]:
        """Pack pieces onto as few sheets as the heuristic manages.

        Args:
            pieces: Pieces in insertion order.

        Returns:
            Labeled cuts in placement order (descending piece area).

        Raises:
            PieceExceedsSheetError: If any piece cannot fit on an empty sheet
                in either orientation. No cuts are produced in that case.
        """
        self._check_pieces_fit(pieces)

        sorted_pieces = self._sort_by_area(pieces)
        logger.debug(
            "Packing %d pieces onto %gx%g sheets",
            len(sorted_pieces),
            self.sheet_width,
            self.sheet_height,
        )

        spaces: list[Space] = [Space.full_sheet(self.sheet_width, self.sheet_height, 0)]
        sheets_opened = 1
        cuts: list[Cut] = []

        for piece in sorted_pieces:
            cut = self._place_first_fit(piece, spaces)

            if cut is None:
                # Nothing open admits the piece; it always fits a fresh sheet
                new_space = Space.full_sheet(
                    self.sheet_width, self.sheet_height, sheets_opened
                )
                sheets_opened += 1
                spaces.append(new_space)
                logger.debug(
                    "Opened sheet %d for piece %d", new_space.sheet, piece.id
                )
                cut = try_place(piece, new_space)
                if cut is None:
                    raise PieceExceedsSheetError(
                        piece, self.sheet_width, self.sheet_height
                    )
                self._consume(spaces, len(spaces) - 1, cut)

            cuts.append(cut)

        if cuts:
            logger.info(
                "Packed %d pieces onto %d sheet(s)",
                len(cuts),
                max(c.sheet for c in cuts) + 1,
            )
        return tuple(assign_labels(cuts))

    def _check_pieces_fit(self, pieces: Sequence[Piece]) -> None:
        """Fail before any placement if some piece can never fit a sheet."""
        for piece in pieces:
            if not piece.fits_within(self.sheet_width, self.sheet_height):
                raise PieceExceedsSheetError(piece, self.sheet_width, self.sheet_height)

    def _sort_by_area(self, pieces: Sequence[Piece]) -> list[Piece]:
        """Sort pieces by area, largest first.

        ``sorted`` is stable, so equal-area pieces keep their insertion order.
        """
        return sorted(pieces, key=lambda p: p.area, reverse=True)

    def _place_first_fit(self, piece: Piece, spaces: list[Space]) -> Cut | None:
        """Place a piece into the first space that admits it, if any."""
        for index, space in enumerate(spaces):
            cut = try_place(piece, space)
            if cut is not None:
                self._consume(spaces, index, cut)
                return cut
        return None

    def _consume(self, spaces: list[Space], index: int, cut: Cut) -> None:
        """Remove ``spaces[index]`` and append the residuals left by ``cut``.

        ``pop`` keeps the remaining spaces in insertion order, which the
        first-fit scan depends on.
        """
        space = spaces.pop(index)
        spaces.extend(split_space(space, cut.width, cut.height))


def pack(
    pieces: Sequence[Piece],
    sheet_width: float,
    sheet_height: float,
) -> tuple[Cut, ...]:
    """Pack pieces onto sheet_width x sheet_height sheets.

    Convenience wrapper around :class:`GuillotinePacker`.

    Example:
        >>> cuts = pack([Piece(60, 40, id=1)], 100, 100)
        >>> cuts[0].label, cuts[0].x, cuts[0].y, cuts[0].sheet
        ('A', 0.0, 0.0, 0)
    """
    return GuillotinePacker(sheet_width, sheet_height).pack(pieces)
