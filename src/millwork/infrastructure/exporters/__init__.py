"""Exporter framework for project plans.

Registered exporters:
- csv: Cut list for external sheet optimizers
- dxf: One DXF drilling file per machined piece
- json: Machining operations per piece with time estimates

Usage:
    from millwork.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["csv", "dxf", "json"], plan, project_name="kitchen")
"""

from millwork.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from millwork.infrastructure.exporters.csv_cutlist import (
    CSV_HEADER,
    CsvCutListExporter,
    cut_list_rows,
    format_cut_list_csv,
    sanitize_csv_text,
)
from millwork.infrastructure.exporters.dxf import (
    DxfExporter,
    dxf_filename,
    layer_colors,
    serialize,
)
from millwork.infrastructure.exporters.machining_json import MachiningJsonExporter

__all__ = [
    "CSV_HEADER",
    "CsvCutListExporter",
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "MachiningJsonExporter",
    "cut_list_rows",
    "dxf_filename",
    "format_cut_list_csv",
    "layer_colors",
    "sanitize_csv_text",
    "serialize",
]
