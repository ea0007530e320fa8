"""Infrastructure layer - exporters and formatters."""

from .exporters import (
    CsvCutListExporter,
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    MachiningJsonExporter,
)
from .formatters import (
    CostReportFormatter,
    CutListFormatter,
    HardwareReportFormatter,
    MaterialReportFormatter,
    format_project_summary,
)

__all__ = [
    "CostReportFormatter",
    "CsvCutListExporter",
    "CutListFormatter",
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "HardwareReportFormatter",
    "MachiningJsonExporter",
    "MaterialReportFormatter",
    "format_project_summary",
]
