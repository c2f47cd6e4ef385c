"""Output formatters for cut plans."""

from __future__ import annotations

import json
from typing import Any, Iterable

from sheetcut.application.dtos import CutPlanOutput
from sheetcut.domain import Cut, PackingResult, Unit


class InstructionsFormatter:
    """Formats cuts as a numbered list of cutting instructions.

    Sheet numbers are shown 1-based; the plan itself is 0-based.
    """

    def __init__(self, unit: Unit = Unit.CM) -> None:
        self.unit = unit

    def instruction(self, cut: Cut) -> str:
        """Return the instruction line for a single cut."""
        return (
            f"{cut.label}: Cut a {cut.width:g} x {cut.height:g} {self.unit.value} "
            f"piece at position ({cut.x:g}, {cut.y:g}) on sheet {cut.sheet + 1}"
        )

    def lines(self, cuts: Iterable[Cut]) -> list[str]:
        """Return instruction lines in plan order, without numbering."""
        return [self.instruction(cut) for cut in cuts]

    def format(self, cuts: Iterable[Cut]) -> str:
        """Format cuts as a numbered instruction list."""
        lines = self.lines(cuts)
        if not lines:
            return "No cuts calculated yet."
        return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, start=1))


class CutTableFormatter:
    """Formats a packing result as per-sheet tables."""

    def __init__(self, unit: Unit = Unit.CM) -> None:
        self.unit = unit

    def format(self, result: PackingResult) -> str:
        """Format the plan as one table per sheet plus a total line."""
        if not result.layouts:
            return "No cuts calculated yet."

        u = self.unit.value
        lines = [
            f"CUT PLAN ({result.sheet_width:g} x {result.sheet_height:g} {u} sheets)",
            "=" * 70,
        ]
        for layout in result.layouts:
            lines.append(
                f"Sheet {layout.sheet_index + 1} - {layout.cut_count} cut(s), "
                f"{layout.waste_percentage:.1f}% waste"
            )
            lines.append(
                f"{'Label':<8} {'Width':<10} {'Height':<10} {'X':<10} {'Y':<10} {'Rotated'}"
            )
            lines.append("-" * 70)
            for cut in layout.cuts:
                lines.append(
                    f"{cut.label:<8} {cut.width:<10g} {cut.height:<10g} "
                    f"{cut.x:<10g} {cut.y:<10g} {'yes' if cut.rotated else 'no'}"
                )
            lines.append("")

        lines.append("-" * 70)
        lines.append(
            f"TOTAL: {result.total_sheets} sheet(s), {result.total_cuts} cut(s), "
            f"{result.total_waste_percentage:.1f}% waste"
        )
        return "\n".join(lines)


class JsonExporter:
    """Exports a cut plan as JSON."""

    def to_dict(self, output: CutPlanOutput) -> dict[str, Any]:
        """Build the JSON-serializable representation of a plan."""
        if not output.is_valid or output.result is None:
            return {"errors": output.errors}

        result = output.result
        instructions = InstructionsFormatter(output.unit)
        return {
            "unit": output.unit.value,
            "sheet": {"width": result.sheet_width, "height": result.sheet_height},
            "cuts": [self._format_cut(cut) for cut in output.cuts],
            "sheets": [
                {
                    "index": layout.sheet_index,
                    "cut_ids": [cut.id for cut in layout.cuts],
                    "used_area": layout.used_area,
                    "waste_percentage": round(layout.waste_percentage, 2),
                }
                for layout in result.layouts
            ],
            "instructions": instructions.lines(output.cuts),
            "summary": {
                "total_sheets": result.total_sheets,
                "total_cuts": result.total_cuts,
                "total_waste_percentage": round(result.total_waste_percentage, 2),
            },
        }

    def export(self, output: CutPlanOutput) -> str:
        """Export a plan as a JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def _format_cut(self, cut: Cut) -> dict[str, Any]:
        return {
            "id": cut.id,
            "label": cut.label,
            "width": cut.width,
            "height": cut.height,
            "x": cut.x,
            "y": cut.y,
            "sheet": cut.sheet,
            "rotated": cut.rotated,
        }
