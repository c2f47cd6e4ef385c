"""Plain-text exporter for cutting instructions."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from sheetcut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from sheetcut.infrastructure.exporters.base import ExporterRegistry, require_valid
from sheetcut.infrastructure.formatters import InstructionsFormatter

if TYPE_CHECKING:
    from sheetcut.application.dtos import CutPlanOutput


@ExporterRegistry.register("txt")
class InstructionsExporter:
    """Writes the numbered cut instructions followed by a waste summary."""

    format_name: ClassVar[str] = "txt"
    file_extension: ClassVar[str] = "txt"

    def export(self, output: CutPlanOutput, path: Path) -> list[Path]:
        path.write_text(self.export_string(output) + "\n", encoding="utf-8")
        return [path]

    def export_string(self, output: CutPlanOutput) -> str:
        require_valid(output, self.format_name)
        instructions = InstructionsFormatter(output.unit).format(output.cuts)
        summary = CutDiagramRenderer().render_waste_summary(output.result)
        return f"CUT INSTRUCTIONS\n{'=' * 40}\n{instructions}\n\n{summary}"
