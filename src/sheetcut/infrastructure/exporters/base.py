"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sheetcut.application.dtos import CutPlanOutput


logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Raised when a plan cannot be exported (e.g. the plan has errors)."""


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all cut plan exporters.

    Attributes:
        format_name: Registry name of the format (e.g., "svg", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: CutPlanOutput, path: Path) -> list[Path]:
        """Write a plan to ``path`` and return every file written.

        Formats that produce one file per sheet derive sibling file names
        from ``path``.
        """
        ...

    def export_string(self, output: CutPlanOutput) -> str:
        """Export a plan as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


def require_valid(output: CutPlanOutput, format_name: str) -> None:
    """Raise ExportError unless ``output`` carries a computed plan."""
    if not output.is_valid or output.result is None:
        raise ExportError(
            f"Cannot export '{format_name}': plan has errors: {'; '.join(output.errors)}"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("json")
        class JsonPlanExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    "Overwriting existing exporter for format '%s'", format_name
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(
                "Registered exporter '%s': %s", format_name, exporter_class.__name__
            )
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of all registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports a plan to one or more formats inside an output directory.

    Attributes:
        output_dir: Directory where exported files are written. Created on
            first export if missing.
        exporter_options: Per-format keyword arguments passed to the
            exporter constructor (e.g., ``{"svg": {"max_width": 800}}``).
    """

    def __init__(
        self,
        output_dir: Path,
        exporter_options: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.exporter_options = exporter_options or {}

    def export_all(
        self,
        formats: list[str],
        output: CutPlanOutput,
        project_name: str = "cutplan",
    ) -> dict[str, list[Path]]:
        """Export a plan to several formats.

        Files are named ``{project_name}.{ext}``.

        Args:
            formats: Format names to export (e.g., ["json", "svg"]).
            output: The plan to export.
            project_name: Base name for output files.

        Returns:
            Mapping of format name to the files written for it.

        Raises:
            KeyError: If any format is not registered.
            ExportError: If the plan has errors.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, list[Path]] = {}
        for format_name in formats:
            options = self.exporter_options.get(format_name, {})
            exporter = ExporterRegistry.get(format_name)(**options)
            filepath = self.output_dir / f"{project_name}.{exporter.file_extension}"

            logger.info("Exporting to %s: %s", format_name, filepath)
            results[format_name] = exporter.export(output, filepath)

        return results
