"""SVG exporter for sheet cut diagrams.

Wraps CutDiagramRenderer and writes one SVG file per sheet.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from sheetcut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from sheetcut.infrastructure.exporters.base import (
    ExportError,
    ExporterRegistry,
    require_valid,
)

if TYPE_CHECKING:
    from sheetcut.application.dtos import CutPlanOutput


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for cut diagrams.

    A single-sheet plan is written to ``path`` itself; multi-sheet plans are
    written to ``{stem}_1.svg``, ``{stem}_2.svg`` and so on.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(self, max_width: float = 600.0, max_height: float = 400.0) -> None:
        self.renderer = CutDiagramRenderer(max_width=max_width, max_height=max_height)

    def export(self, output: CutPlanOutput, path: Path) -> list[Path]:
        svgs = self.export_sheets(output)

        if len(svgs) == 1:
            path.write_text(svgs[0], encoding="utf-8")
            return [path]

        created: list[Path] = []
        for i, svg_content in enumerate(svgs, start=1):
            file_path = path.parent / f"{path.stem}_{i}{path.suffix or '.svg'}"
            file_path.write_text(svg_content, encoding="utf-8")
            created.append(file_path)
        return created

    def export_sheets(self, output: CutPlanOutput) -> list[str]:
        """Return one standalone SVG document per sheet, in sheet order."""
        require_valid(output, self.format_name)
        return self.renderer.render_all_svg(output.result)

    def export_string(self, output: CutPlanOutput) -> str:
        """Return the diagram of a single-sheet plan as one SVG document.

        Raises:
            ExportError: If the plan uses more than one sheet; use
                ``export_sheets`` to get one document per sheet.
        """
        svgs = self.export_sheets(output)
        if len(svgs) != 1:
            raise ExportError(
                f"Cannot export {self.format_name} as one document: plan uses "
                f"{len(svgs)} sheets"
            )
        return svgs[0]
