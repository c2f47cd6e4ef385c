"""Exporter framework for cut plans.

Registered exporters:
- json: Complete plan with cuts, per-sheet summary and instructions
- svg: One cut diagram per sheet
- txt: Numbered cutting instructions and waste summary

Usage:
    from sheetcut.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    ExportManager(Path("out")).export_all(["json", "svg"], output, "shelves")
"""

from sheetcut.infrastructure.exporters.base import (
    ExportError,
    ExportManager,
    Exporter,
    ExporterRegistry,
)

# Importing the modules registers the exporters
from sheetcut.infrastructure.exporters.instructions import InstructionsExporter
from sheetcut.infrastructure.exporters.plan_json import JsonPlanExporter
from sheetcut.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "ExportError",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "InstructionsExporter",
    "JsonPlanExporter",
    "SvgExporter",
]
