"""Positional labels for cuts."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from ..value_objects import Cut

__all__ = ["assign_labels", "label_for_index"]


def label_for_index(index: int) -> str:
    """Return the label for the cut at ``index`` in output order.

    Letters cycle A-Z; from index 26 on, the cycle number is appended
    (0 -> "A", 25 -> "Z", 26 -> "A1", 27 -> "B1", 52 -> "A2").
    """
    if index < 0:
        raise ValueError("Label index must be non-negative")
    letter = chr(ord("A") + index % 26)
    suffix = str(index // 26) if index >= 26 else ""
    return letter + suffix


def assign_labels(cuts: Iterable[Cut]) -> list[Cut]:
    """Return copies of ``cuts`` labeled by their position in the sequence."""
    return [replace(cut, label=label_for_index(i)) for i, cut in enumerate(cuts)]
