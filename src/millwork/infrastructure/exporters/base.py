"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from millwork.application.dtos import ProjectPlan


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a ProjectPlan to a specific format.

    Attributes:
        format_name: Registry name of the format (e.g., "csv", "dxf").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: ProjectPlan, path: Path) -> Any:
        """Export a project plan to ``path``."""
        ...

    def export_string(self, output: ProjectPlan) -> str:
        """Export a project plan as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("csv")
        class CsvCutListExporter:
            format_name = "csv"
            file_extension = "csv"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Any:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
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
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports a project plan to one or more formats.

    Single-file formats are written as ``{project_name}_{format}.{ext}``.
    Per-piece formats (DXF) get a ``{project_name}_{format}`` directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def target_for(self, exporter: Exporter, project_name: str) -> Path:
        if getattr(exporter, "per_piece", False):
            return self.output_dir / f"{project_name}_{exporter.format_name}"
        return self.output_dir / f"{project_name}_{exporter.format_name}.{exporter.file_extension}"

    def export_all(
        self,
        formats: list[str],
        output: ProjectPlan,
        project_name: str = "project",
    ) -> dict[str, Path]:
        """Export to several formats.

        Returns:
            Mapping of format name to the file or directory written.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            target = self.target_for(exporter, project_name)
            logger.info(f"Exporting to {format_name}: {target}")
            exporter.export(output, target)
            results[format_name] = target
        return results

    def export_single(
        self,
        format_name: str,
        output: ProjectPlan,
        project_name: str = "project",
    ) -> Path:
        return self.export_all([format_name], output, project_name)[format_name]
