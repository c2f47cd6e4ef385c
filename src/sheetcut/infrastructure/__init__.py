"""Infrastructure layer - renderers, formatters and exporters."""

from .cut_diagram_renderer import MIN_ASCII_WIDTH, CutDiagramRenderer
from .formatters import CutTableFormatter, InstructionsFormatter, JsonExporter
from .exporters import (
    ExportError,
    ExportManager,
    Exporter,
    ExporterRegistry,
    InstructionsExporter,
    JsonPlanExporter,
    SvgExporter,
)

__all__ = [
    # Cut diagram rendering
    "CutDiagramRenderer",
    "MIN_ASCII_WIDTH",
    # Formatters
    "CutTableFormatter",
    "InstructionsFormatter",
    "JsonExporter",
    # Exporter framework
    "ExportError",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "InstructionsExporter",
    "JsonPlanExporter",
    "SvgExporter",
]
