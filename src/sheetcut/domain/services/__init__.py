"""Domain services for the packing engine."""

from .labeling import assign_labels, label_for_index
from .layout import PackingResult, SheetLayout, build_packing_result
from .packing import GuillotinePacker, pack
from .partitioning import split_space
from .placement import try_place

__all__ = [
    "GuillotinePacker",
    "PackingResult",
    "SheetLayout",
    "assign_labels",
    "build_packing_result",
    "label_for_index",
    "pack",
    "split_space",
    "try_place",
]
