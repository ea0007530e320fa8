"""CSV cut list for external sheet optimizers.

The column layout is the one most panel optimizers import:
``Length,Width,Qty,Label,Material,Enabled,Grain``. Every physical copy of a
piece gets its own row with Qty 1, and dimensions are saw-cut sizes.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from millwork.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from millwork.application.dtos import ProjectPlan
    from millwork.domain.entities import Piece


logger = logging.getLogger(__name__)

CSV_HEADER = ("Length", "Width", "Qty", "Label", "Material", "Enabled", "Grain")


def sanitize_csv_text(text: str) -> str:
    """Drop characters optimizers choke on: commas become spaces, quotes and newlines go."""
    return text.replace(",", " ").replace('"', "").replace("\n", " ").strip()


def cut_list_rows(pieces: Iterable[Piece]) -> list[list[str]]:
    """One row per physical copy, skipping pieces with no cut area."""
    rows: list[list[str]] = []
    for piece in pieces:
        cut = piece.cut_dimensions
        if cut.cut_width <= 0 or cut.cut_height <= 0:
            logger.warning(
                "Skipping piece %s (%s): cut size %gx%g",
                piece.id,
                piece.name,
                cut.cut_width,
                cut.cut_height,
            )
            continue
        material = piece.material
        row = [
            f"{cut.cut_height:.1f}",
            f"{cut.cut_width:.1f}",
            "1",
            sanitize_csv_text(f"{piece.name} - {piece.id}"),
            f"{sanitize_csv_text(material.name)} {material.thickness:g}mm",
            "true",
            "true" if material.grain else "false",
        ]
        rows.extend(list(row) for _ in range(piece.quantity))
    return rows


def format_cut_list_csv(pieces: Iterable[Piece]) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(cut_list_rows(pieces))
    return output.getvalue()


@ExporterRegistry.register("csv")
class CsvCutListExporter:
    """Exports the project cut list as optimizer CSV.

    Attributes:
        format_name: "csv"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export(self, output: ProjectPlan, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Wrote cut list CSV to %s", path)

    def export_string(self, output: ProjectPlan) -> str:
        return format_cut_list_csv(output.pieces)
