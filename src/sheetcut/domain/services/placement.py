"""Placement trial for a single piece against a single free space."""

from __future__ import annotations

import logging

from ..value_objects import Cut, Piece, Space

logger = logging.getLogger(__name__)

__all__ = ["try_place"]


def try_place(piece: Piece, space: Space) -> Cut | None:
    """Try to place a piece at the top-left corner of a free space.

    The original orientation is tried first, so a piece that fits both ways
    is never rotated. A failed trial is not an error; the caller moves on to
    the next space.

    Args:
        piece: The piece to place.
        space: The candidate free rectangle.

    Returns:
        The resulting cut (unlabeled), or None if the piece does not fit in
        either orientation.
    """
    if piece.width <= space.width and piece.height <= space.height:
        return Cut(
            id=piece.id,
            width=piece.width,
            height=piece.height,
            x=space.x,
            y=space.y,
            sheet=space.sheet,
        )

    if piece.height <= space.width and piece.width <= space.height:
        logger.debug(
            "Piece %d fits at (%s, %s) on sheet %d when rotated",
            piece.id,
            space.x,
            space.y,
            space.sheet,
        )
        return Cut(
            id=piece.id,
            width=piece.height,
            height=piece.width,
            x=space.x,
            y=space.y,
            sheet=space.sheet,
            rotated=True,
        )

    return None
