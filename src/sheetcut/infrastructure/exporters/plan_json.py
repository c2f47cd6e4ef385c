"""JSON exporter for complete cut plans."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from sheetcut.infrastructure.exporters.base import ExporterRegistry, require_valid
from sheetcut.infrastructure.formatters import JsonExporter

if TYPE_CHECKING:
    from sheetcut.application.dtos import CutPlanOutput


@ExporterRegistry.register("json")
class JsonPlanExporter:
    """Writes the plan as JSON (cuts, per-sheet summary and instructions)."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self) -> None:
        self._formatter = JsonExporter()

    def export(self, output: CutPlanOutput, path: Path) -> list[Path]:
        path.write_text(self.export_string(output), encoding="utf-8")
        return [path]

    def export_string(self, output: CutPlanOutput) -> str:
        require_valid(output, self.format_name)
        return self._formatter.export(output)
