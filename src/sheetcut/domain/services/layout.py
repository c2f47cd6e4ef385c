"""Per-sheet grouping and waste statistics for a packed cut plan.

The packing driver returns cuts in placement order. These types regroup
them by sheet for renderers and reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..value_objects import Cut

__all__ = ["PackingResult", "SheetLayout", "build_packing_result"]


@dataclass(frozen=True)
class SheetLayout:
    """Cuts placed on a single sheet.

    Attributes:
        sheet_index: Zero-based index of this sheet.
        sheet_width: Sheet width.
        sheet_height: Sheet height.
        cuts: Cuts on this sheet, in placement order.
    """

    sheet_index: int
    sheet_width: float
    sheet_height: float
    cuts: tuple[Cut, ...]

    def __post_init__(self) -> None:
        if self.sheet_index < 0:
            raise ValueError("Sheet index must be non-negative")
        if any(cut.sheet != self.sheet_index for cut in self.cuts):
            raise ValueError("All cuts must belong to the layout's sheet")

    @property
    def sheet_area(self) -> float:
        """Total area of the sheet."""
        return self.sheet_width * self.sheet_height

    @property
    def used_area(self) -> float:
        """Area covered by cuts."""
        return sum(cut.area for cut in self.cuts)

    @property
    def waste_area(self) -> float:
        """Area not covered by any cut."""
        return self.sheet_area - self.used_area

    @property
    def utilization(self) -> float:
        """Fraction of the sheet covered by cuts (0-1)."""
        if self.sheet_area == 0:
            return 0.0
        return self.used_area / self.sheet_area

    @property
    def waste_percentage(self) -> float:
        """Percentage of the sheet left as waste."""
        return (1 - self.utilization) * 100

    @property
    def cut_count(self) -> int:
        """Number of cuts on this sheet."""
        return len(self.cuts)


@dataclass(frozen=True)
class PackingResult:
    """A complete cut plan grouped by sheet.

    Attributes:
        cuts: All cuts in placement order.
        layouts: One layout per sheet, in sheet index order.
        sheet_width: Sheet width used for the run.
        sheet_height: Sheet height used for the run.
    """

    cuts: tuple[Cut, ...]
    layouts: tuple[SheetLayout, ...]
    sheet_width: float
    sheet_height: float

    @property
    def total_sheets(self) -> int:
        """Number of sheets used."""
        return len(self.layouts)

    @property
    def total_cuts(self) -> int:
        """Number of cuts across all sheets."""
        return len(self.cuts)

    @property
    def total_waste_percentage(self) -> float:
        """Waste across all sheets as a percentage of total sheet area."""
        if not self.layouts:
            return 0.0
        total_area = sum(layout.sheet_area for layout in self.layouts)
        used_area = sum(layout.used_area for layout in self.layouts)
        return (1 - used_area / total_area) * 100

    def layout_for(self, sheet_index: int) -> SheetLayout:
        """Return the layout of a sheet.

        Raises:
            KeyError: If the plan does not use that sheet.
        """
        for layout in self.layouts:
            if layout.sheet_index == sheet_index:
                return layout
        raise KeyError(f"Sheet {sheet_index} is not part of this plan")


def build_packing_result(
    cuts: Sequence[Cut],
    sheet_width: float,
    sheet_height: float,
) -> PackingResult:
    """Group cuts by sheet.

    Args:
        cuts: Cuts in placement order, as returned by the packer.
        sheet_width: Sheet width used for the run.
        sheet_height: Sheet height used for the run.

    Returns:
        PackingResult with layouts in sheet index order.
    """
    by_sheet: dict[int, list[Cut]] = {}
    for cut in cuts:
        by_sheet.setdefault(cut.sheet, []).append(cut)

    layouts = tuple(
        SheetLayout(
            sheet_index=index,
            sheet_width=sheet_width,
            sheet_height=sheet_height,
            cuts=tuple(by_sheet[index]),
        )
        for index in sorted(by_sheet)
    )
    return PackingResult(
        cuts=tuple(cuts),
        layouts=layouts,
        sheet_width=sheet_width,
        sheet_height=sheet_height,
    )
