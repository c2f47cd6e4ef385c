"""Editable list of pieces to cut.

A CutList owns the identity counter for its pieces, so piece ids are
unique within one list and independent of any other list in the process.
"""

from __future__ import annotations

import logging

from sheetcut.domain import InvalidPieceDimensionError, Piece, is_valid_dimension

logger = logging.getLogger(__name__)

__all__ = ["CutList"]


class CutList:
    """Ordered collection of pieces awaiting a packing run.

    Example:
        cut_list = CutList()
        cut_list.add_piece(60, 40)
        cut_list.add_piece(30, 20, quantity=2)
        cuts = pack(cut_list.pieces, 100, 100)
    """

    def __init__(self, first_id: int = 1) -> None:
        """Initialize an empty cut list.

        Args:
            first_id: Identity assigned to the first piece added.
        """
        self._pieces: list[Piece] = []
        self._next_id = first_id

    @property
    def pieces(self) -> tuple[Piece, ...]:
        """Pieces in insertion order."""
        return tuple(self._pieces)

    @property
    def total_area(self) -> float:
        """Combined area of all pieces."""
        return sum(piece.area for piece in self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def add_piece(self, width: float, height: float, quantity: int = 1) -> list[Piece]:
        """Add ``quantity`` identical pieces, each with its own id.

        Args:
            width: Piece width (finite and positive).
            height: Piece height (finite and positive).
            quantity: Number of copies to add (at least 1).

        Returns:
            The pieces that were added.

        Raises:
            InvalidPieceDimensionError: If a dimension is not a finite
                positive number.
            ValueError: If quantity is less than 1.
        """
        if not (is_valid_dimension(width) and is_valid_dimension(height)):
            raise InvalidPieceDimensionError(width, height)
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")

        added: list[Piece] = []
        for _ in range(quantity):
            piece = Piece(width=width, height=height, id=self._next_id)
            self._next_id += 1
            added.append(piece)

        self._pieces.extend(added)
        logger.debug("Added %d piece(s) of %gx%g", quantity, width, height)
        return added

    def remove_piece(self, index: int) -> Piece:
        """Remove and return the piece at list position ``index``.

        Raises:
            IndexError: If ``index`` is out of range.
        """
        return self._pieces.pop(index)

    def reset(self) -> None:
        """Remove all pieces.

        The id counter is not rewound, so ids from an earlier plan are never
        reused by pieces added afterwards.
        """
        self._pieces.clear()
