"""JSON machining report: every operation per piece, edge faces included."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from millwork.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from millwork.application.dtos import ProjectPlan
    from millwork.domain.services import PieceMachining
    from millwork.domain.value_objects import MachiningOperation


logger = logging.getLogger(__name__)


def operation_to_dict(op: MachiningOperation) -> dict[str, Any]:
    return {
        "kind": op.kind.value,
        "feature": op.feature.value,
        "tool": op.tool_id,
        "face": op.face.value,
        "x": op.x,
        "y": op.y,
        "diameter": op.diameter,
        "depth": op.depth,
        "description": op.description,
    }


def piece_machining_to_dict(machining: PieceMachining) -> dict[str, Any]:
    piece = machining.piece
    geometry = machining.geometry
    return {
        "piece_id": piece.id,
        "name": piece.name,
        "module_id": piece.module_id,
        "role": piece.role.value,
        "width": geometry.width,
        "height": geometry.height,
        "thickness": geometry.thickness,
        "quantity": piece.quantity,
        "operation_count": len(machining.operations),
        "estimated_seconds": machining.estimated_seconds,
        "operations": [operation_to_dict(op) for op in machining.operations],
    }


@ExporterRegistry.register("json")
class MachiningJsonExporter:
    """Exports the machining plan as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def to_dict(self, output: ProjectPlan) -> dict[str, Any]:
        pieces = [piece_machining_to_dict(m) for m in output.machining]
        return {
            "project_name": output.project_name,
            "pieces": pieces,
            "total_operations": sum(p["operation_count"] for p in pieces),
            "estimated_seconds": sum(p["estimated_seconds"] for p in pieces),
        }

    def export(self, output: ProjectPlan, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Wrote machining JSON to %s", path)

    def export_string(self, output: ProjectPlan) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)
