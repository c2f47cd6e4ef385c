"""Cut diagram rendering for packed sheets.

This module provides SVG and ASCII rendering of sheet layouts showing cut
placements and labels, plus a plain-text waste summary.
"""

from __future__ import annotations

from sheetcut.domain import Cut, PackingResult, SheetLayout

WOOD_PATTERN_ID = "woodPattern"

# Narrowest ASCII diagram that still leaves room inside the border
MIN_ASCII_WIDTH = 10


class CutDiagramRenderer:
    """Renders cut diagrams in SVG and ASCII format.

    Each sheet is drawn in sheet coordinates (via ``viewBox``) and scaled to
    fit a ``max_width`` x ``max_height`` display region while preserving the
    sheet's aspect ratio. Landscape sheets take the full display width;
    portrait and square sheets take the full display height.

    Attributes:
        max_width: Display width in pixels for landscape sheets.
        max_height: Display height in pixels for portrait/square sheets.
        pattern_fill: Base color of the wood background pattern.
        pattern_stroke: Color of the pattern's cross-hatching.
        cut_stroke: Stroke color for cut outlines.
        text_color: Color for labels.
    """

    def __init__(
        self,
        max_width: float = 600.0,
        max_height: float = 400.0,
        pattern_fill: str = "#d2b48c",  # Tan
        pattern_stroke: str = "#c19a6b",  # Camel
        cut_stroke: str = "white",
        text_color: str = "white",
    ) -> None:
        if max_width <= 0 or max_height <= 0:
            raise ValueError("Display region must be positive")
        self.max_width = max_width
        self.max_height = max_height
        self.pattern_fill = pattern_fill
        self.pattern_stroke = pattern_stroke
        self.cut_stroke = cut_stroke
        self.text_color = text_color

    def display_size(self, sheet_width: float, sheet_height: float) -> tuple[float, float]:
        """Compute the on-screen size of a sheet.

        Args:
            sheet_width: Sheet width in plan units.
            sheet_height: Sheet height in plan units.

        Returns:
            Tuple of (width, height) in pixels.
        """
        aspect_ratio = sheet_width / sheet_height
        if aspect_ratio > 1:
            width = self.max_width
            height = width / aspect_ratio
        else:
            height = self.max_height
            width = height * aspect_ratio
        return width, height

    def render_svg(self, layout: SheetLayout, total_sheets: int = 1) -> str:
        """Generate the SVG cut diagram for a single sheet.

        Args:
            layout: Sheet layout with placed cuts.
            total_sheets: Total number of sheets (for the title).

        Returns:
            SVG document as a string.
        """
        sheet_w = layout.sheet_width
        sheet_h = layout.sheet_height
        width, height = self.display_size(sheet_w, sheet_h)

        parts: list[str] = [
            f'<svg width="{width:g}" height="{height:g}" '
            f'viewBox="0 0 {sheet_w:g} {sheet_h:g}" '
            f'preserveAspectRatio="xMidYMid meet" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f"  <title>Sheet {layout.sheet_index + 1} of {total_sheets}</title>",
            self._render_pattern(),
            "",
            "  <!-- Sheet -->",
            f'  <rect width="{sheet_w:g}" height="{sheet_h:g}" '
            f'fill="url(#{WOOD_PATTERN_ID})"/>',
            "",
            "  <!-- Cuts -->",
        ]

        for cut in layout.cuts:
            parts.append(self._render_cut(cut))

        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, result: PackingResult) -> list[str]:
        """Generate SVG cut diagrams for all sheets, in sheet order."""
        total_sheets = result.total_sheets
        return [self.render_svg(layout, total_sheets) for layout in result.layouts]

    def _render_pattern(self) -> str:
        return (
            "  <defs>\n"
            f'    <pattern id="{WOOD_PATTERN_ID}" patternUnits="userSpaceOnUse" '
            f'width="10" height="10">\n'
            f'      <rect width="10" height="10" fill="{self.pattern_fill}"/>\n'
            f'      <path d="M0 0L10 10M10 0L0 10" stroke="{self.pattern_stroke}" '
            f'stroke-width="0.5"/>\n'
            "    </pattern>\n"
            "  </defs>"
        )

    def _render_cut(self, cut: Cut) -> str:
        """Render one cut as a dashed outline with its label centered."""
        text_x = cut.x + cut.width / 2
        text_y = cut.y + cut.height / 2
        return (
            f'  <g id="cut-{cut.id}">\n'
            f'    <rect x="{cut.x:g}" y="{cut.y:g}" '
            f'width="{cut.width:g}" height="{cut.height:g}" '
            f'fill="none" stroke="{self.cut_stroke}" stroke-width="0.5" '
            f'stroke-dasharray="4 2"/>\n'
            f'    <text x="{text_x:g}" y="{text_y:g}" text-anchor="middle" '
            f'dominant-baseline="middle" fill="{self.text_color}" '
            f'font-size="smaller" font-weight="bold">{cut.label}</text>\n'
            "  </g>"
        )

    def render_ascii(
        self,
        layout: SheetLayout,
        width: int = 80,
        total_sheets: int = 1,
    ) -> str:
        """Generate an ASCII cut diagram for a single sheet.

        Args:
            layout: Sheet layout with placed cuts.
            width: Terminal width in characters (default 80).
            total_sheets: Total number of sheets (for the header).

        Returns:
            ASCII representation of the layout.

        Raises:
            ValueError: If width is below MIN_ASCII_WIDTH.
        """
        if width < MIN_ASCII_WIDTH:
            raise ValueError(
                f"Diagram width must be at least {MIN_ASCII_WIDTH} characters (got {width})"
            )
        usable_width = width - 2
        scale_x = usable_width / layout.sheet_width

        # Terminal cells are roughly twice as tall as they are wide
        aspect_ratio = layout.sheet_height / layout.sheet_width
        grid_height = max(int(usable_width * aspect_ratio * 0.5), 10)
        scale_y = grid_height / layout.sheet_height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for cut in layout.cuts:
            self._draw_cut_ascii(grid, cut, scale_x, scale_y)

        lines = [
            f"Sheet {layout.sheet_index + 1} of {total_sheets} - "
            f"{layout.cut_count} cut{'s' if layout.cut_count != 1 else ''} - "
            f"{layout.waste_percentage:.1f}% waste",
            "+" + "-" * usable_width + "+",
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_cut_ascii(
        self,
        grid: list[list[str]],
        cut: Cut,
        scale_x: float,
        scale_y: float,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0

        x1 = max(0, min(int(cut.x * scale_x), grid_width - 1))
        x2 = max(0, min(int(cut.right_edge * scale_x), grid_width - 1))
        y1 = max(0, min(int(cut.y * scale_y), grid_height - 1))
        y2 = max(0, min(int(cut.bottom_edge * scale_y), grid_height - 1))

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        # Label on the first inner row, dimensions on the second
        room = x2 - x1 - 1
        texts = [cut.label, f"{cut.width:g}x{cut.height:g}" + ("R" if cut.rotated else "")]
        for offset, text in enumerate(texts, start=1):
            row = y1 + offset
            if row >= y2 or room < 1:
                break
            for i, char in enumerate(text[:room]):
                grid[row][x1 + 1 + i] = char

    def render_all_ascii(self, result: PackingResult, width: int = 80) -> str:
        """Generate ASCII cut diagrams for all sheets followed by a summary line."""
        if not result.layouts:
            return "No sheets to display."

        total_sheets = result.total_sheets
        parts: list[str] = []
        for layout in result.layouts:
            parts.append(self.render_ascii(layout, width, total_sheets))
            parts.append("")

        parts.append("=" * width)
        parts.append(
            f"SUMMARY: {total_sheets} sheet{'s' if total_sheets != 1 else ''}, "
            f"{result.total_waste_percentage:.1f}% total waste"
        )
        return "\n".join(parts)

    def render_waste_summary(self, result: PackingResult) -> str:
        """Generate a text summary of sheet usage and waste."""
        lines: list[str] = [
            "CUT PLAN SUMMARY",
            "=" * 40,
            f"Total Sheets: {result.total_sheets}",
            f"Total Cuts: {result.total_cuts}",
            f"Total Waste: {result.total_waste_percentage:.1f}%",
            "",
            "Per-Sheet Details:",
        ]
        for layout in result.layouts:
            lines.append(
                f"  Sheet {layout.sheet_index + 1}: "
                f"{layout.cut_count} cut{'s' if layout.cut_count != 1 else ''}, "
                f"{layout.waste_percentage:.1f}% waste"
            )
        return "\n".join(lines)
