"""Unit tests for instruction, table and JSON formatters."""

from __future__ import annotations

import json

from sheetcut.application import CalculateCutsCommand, CutPlanOutput, PieceInput, SheetInput
from sheetcut.domain import Cut, Unit
from sheetcut.infrastructure import CutTableFormatter, InstructionsFormatter, JsonExporter


class TestInstructionsFormatter:
    """Tests for InstructionsFormatter."""

    def test_instruction_line(self) -> None:
        cut = Cut(id=1, width=60, height=40, x=0, y=0, sheet=0, label="A")

        assert InstructionsFormatter(Unit.CM).instruction(cut) == (
            "A: Cut a 60 x 40 cm piece at position (0, 0) on sheet 1"
        )

    def test_fractional_dimensions_and_unit(self) -> None:
        cut = Cut(id=2, width=2.5, height=4, x=7.25, y=0, sheet=2, label="B")

        assert InstructionsFormatter(Unit.IN).instruction(cut) == (
            "B: Cut a 2.5 x 4 in piece at position (7.25, 0) on sheet 3"
        )

    def test_numbered_list(self, single_sheet_output: CutPlanOutput) -> None:
        text = InstructionsFormatter().format(single_sheet_output.cuts)
        lines = text.splitlines()

        assert len(lines) == 3
        assert lines[0] == "1. A: Cut a 60 x 40 cm piece at position (0, 0) on sheet 1"
        assert lines[1].startswith("2. B: Cut a 30 x 20 cm piece at position (60, 0)")
        assert lines[2].startswith("3. C:")

    def test_empty(self) -> None:
        assert InstructionsFormatter().format([]) == "No cuts calculated yet."


class TestCutTableFormatter:
    """Tests for CutTableFormatter."""

    def test_table(self, two_sheet_output: CutPlanOutput) -> None:
        text = CutTableFormatter(Unit.IN).format(two_sheet_output.result)

        assert "CUT PLAN (10 x 10 in sheets)" in text
        assert "Sheet 1 - 1 cut(s), 36.0% waste" in text
        assert "Sheet 2 - 1 cut(s), 36.0% waste" in text
        assert "TOTAL: 2 sheet(s), 2 cut(s), 36.0% waste" in text

    def test_rotated_flag(self, calculate_command: CalculateCutsCommand) -> None:
        output = calculate_command.execute(
            SheetInput(width=5, height=10), [PieceInput(width=8, height=3)]
        )
        text = CutTableFormatter().format(output.result)

        row = next(line for line in text.splitlines() if line.startswith("A "))
        assert row.split() == ["A", "3", "8", "0", "0", "yes"]


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_structure(self, single_sheet_output: CutPlanOutput) -> None:
        data = json.loads(JsonExporter().export(single_sheet_output))

        assert data["unit"] == "cm"
        assert data["sheet"] == {"width": 100, "height": 100}
        assert [c["label"] for c in data["cuts"]] == ["A", "B", "C"]
        assert data["cuts"][0] == {
            "id": 1,
            "label": "A",
            "width": 60,
            "height": 40,
            "x": 0,
            "y": 0,
            "sheet": 0,
            "rotated": False,
        }
        assert data["sheets"] == [
            {"index": 0, "cut_ids": [1, 2, 3], "used_area": 3600, "waste_percentage": 64.0}
        ]
        assert data["summary"]["total_sheets"] == 1
        assert data["summary"]["total_cuts"] == 3
        assert len(data["instructions"]) == 3

    def test_failed_plan(self) -> None:
        output = CutPlanOutput(errors=["Sheet width must be positive"])

        assert JsonExporter().to_dict(output) == {"errors": ["Sheet width must be positive"]}
