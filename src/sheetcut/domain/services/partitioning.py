"""Guillotine (shelf) split of a consumed free space."""

from __future__ import annotations

from ..value_objects import Space

__all__ = ["split_space"]


def split_space(space: Space, placed_width: float, placed_height: float) -> list[Space]:
    """Compute the residual free spaces left after placing a piece.

    The piece occupies the top-left corner of ``space``. The right residual
    is only as tall as the placed piece; the bottom residual spans the full
    width of the original space. Residuals with zero width or height are
    never emitted.

    Args:
        space: The space the piece was placed into.
        placed_width: Width of the piece as placed (after any rotation).
        placed_height: Height of the piece as placed (after any rotation).

    Returns:
        Zero, one or two new spaces, right residual first.
    """
    residuals: list[Space] = []

    if space.width > placed_width:
        residuals.append(
            Space(
                x=space.x + placed_width,
                y=space.y,
                width=space.width - placed_width,
                height=placed_height,
                sheet=space.sheet,
            )
        )

    if space.height > placed_height:
        residuals.append(
            Space(
                x=space.x,
                y=space.y + placed_height,
                width=space.width,
                height=space.height - placed_height,
                sheet=space.sheet,
            )
        )

    return residuals
