"""DXF serializer for per-piece CNC drilling files.

Each piece gets its own R2010 DXF document in millimeters. CAM software
picks tools by layer name, so every tool id in use gets its own layer with
a distinct color. Document metadata (dates, GUIDs) is pinned so the same
input always produces byte-identical text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from io import StringIO
from itertools import chain
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units

from millwork.domain.exceptions import MachiningBoundsError
from millwork.domain.services.machining import find_violations
from millwork.domain.value_objects import MachiningFeature, MachiningOperation, PieceGeometry
from millwork.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.layouts import Modelspace

    from millwork.application.dtos import ProjectPlan
    from millwork.domain.services import PieceMachining


logger = logging.getLogger(__name__)

OUTLINE_LAYER = "OUTLINE"

# AutoCAD color index per known layer.
LAYER_COLORS = {
    OUTLINE_LAYER: 7,  # White - piece perimeter
    "DRILL_5MM": 1,  # Red - System32, Minifix inserts, slide mounts
    "DRILL_8MM": 2,  # Yellow - Minifix bolts
    "DRILL_35MM": 3,  # Green - hinge cups
    "GUIDE_2MM": 4,  # Cyan - pilot holes
    "POCKET_15MM": 5,  # Blue - Minifix cams
    "POCKET_20MM": 6,  # Magenta - large cam locks
    "GROOVE": 8,  # Dark gray - grooves
}
# Colors handed out first to tool layers not listed above.
FALLBACK_COLORS = (30, 40, 140, 150, 200, 210, 230, 9, 10, 11, 12, 13, 14, 15)

# Half length of the cross mark drawn at hinge cup centres.
CROSS_MARK_SIZE = 1.0
DXF_VERSION = "R2010"
DEFAULT_THICKNESS = 18.0

# Custom header properties carrying the piece identity.
PIECE_ID_VAR = "PIECE_ID"
PIECE_NAME_VAR = "PIECE_NAME"


def layer_colors(operations: Sequence[MachiningOperation]) -> dict[str, int]:
    """OUTLINE plus every tool layer in first-seen order, each with a distinct color.

    Unknown tools take ``FALLBACK_COLORS`` first, then any unused color index.

    Raises:
        ValueError: If there are more tool layers than AutoCAD color indexes.
    """
    colors = {OUTLINE_LAYER: LAYER_COLORS[OUTLINE_LAYER]}
    for op in operations:
        if op.tool_id in colors:
            continue
        color = LAYER_COLORS.get(op.tool_id)
        if color is None or color in colors.values():
            used = set(colors.values())
            color = next(
                (c for c in chain(FALLBACK_COLORS, range(1, 256)) if c not in used), None
            )
            if color is None:
                raise ValueError(
                    f"Too many tool layers: no distinct color left for '{op.tool_id}'"
                )
        colors[op.tool_id] = color
    return colors


@contextmanager
def _fixed_metadata() -> Iterator[None]:
    """Pin creation dates and GUIDs, which ezdxf sets on new() and on write()."""
    previous = ezdxf.options.write_fixed_meta_data_for_testing
    ezdxf.options.write_fixed_meta_data_for_testing = True
    try:
        yield
    finally:
        ezdxf.options.write_fixed_meta_data_for_testing = previous


def serialize(
    piece_id: str,
    piece_name: str,
    width: float,
    height: float,
    operations: Sequence[MachiningOperation],
    thickness: float = DEFAULT_THICKNESS,
) -> str:
    """Render one piece and its face operations as DXF text.

    The modelspace holds the outline first, then circles grouped by
    first-seen layer. Hinge cups also get a cross mark at their centre.

    Raises:
        ValueError: If an operation is on an edge face, which cannot be
            drawn on the face outline.
        MachiningBoundsError: If any tool circle leaves the piece.
    """
    edge_ops = [op for op in operations if op.face.is_edge]
    if edge_ops:
        raise ValueError(
            f"Piece '{piece_id}': {len(edge_ops)} edge-face operation(s) cannot be drawn "
            "on the face outline"
        )
    violations = find_violations(PieceGeometry(width, height, thickness, piece_id), operations)
    if violations:
        raise MachiningBoundsError(piece_id, tuple(violations))

    colors = layer_colors(operations)
    with _fixed_metadata():
        doc = ezdxf.new(DXF_VERSION)
        doc.units = units.MM
        doc.header.custom_vars.append(PIECE_ID_VAR, piece_id)
        doc.header.custom_vars.append(PIECE_NAME_VAR, piece_name)
        for name, color in colors.items():
            doc.layers.add(name, color=color)

        msp = doc.modelspace()
        msp.add_lwpolyline(
            [(0.0, 0.0), (width, 0.0), (width, height), (0.0, height)],
            close=True,
            dxfattribs={"layer": OUTLINE_LAYER},
        )
        for layer in colors:
            if layer == OUTLINE_LAYER:
                continue
            for op in operations:
                if op.tool_id == layer:
                    _add_operation(msp, op)

        stream = StringIO()
        doc.write(stream)
    return stream.getvalue()


def _add_operation(msp: Modelspace, op: MachiningOperation) -> None:
    attribs = {"layer": op.tool_id}
    msp.add_circle((op.x, op.y), op.radius, dxfattribs=attribs)
    if op.feature is MachiningFeature.HINGE_CUP:
        d = CROSS_MARK_SIZE
        msp.add_line((op.x - d, op.y), (op.x + d, op.y), dxfattribs=attribs)
        msp.add_line((op.x, op.y - d), (op.x, op.y + d), dxfattribs=attribs)


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")


def dxf_filename(
    piece_name: str, piece_id: str, material: str | None = None, thickness: float | None = None
) -> str:
    """Safe file name, ``<material><thickness>_<piece name>_<piece id>.dxf``.

    Example:
        >>> dxf_filename("Door 1", "k1-door-1", "White Melamine", 18)
        'white_melamine18_door_1_k1-door-1.dxf'
    """
    parts = []
    if material and thickness:
        parts.append(f"{_slug(material)}{thickness:g}")
    parts.append(_slug(piece_name))
    parts.append(re.sub(r"[^A-Za-z0-9-]", "", piece_id))
    return "_".join(parts) + ".dxf"


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Writes one DXF file per machined piece into a directory.

    Edge-face operations (Minifix bolts) are left out of the drawings and
    reported by the JSON machining export instead.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    per_piece: ClassVar[bool] = True

    def render(self, machining: PieceMachining) -> str:
        geometry = machining.geometry
        return serialize(
            machining.piece.id,
            machining.piece.name,
            geometry.width,
            geometry.height,
            machining.face_operations,
            geometry.thickness,
        )

    def export(self, output: ProjectPlan, path: Path) -> list[Path]:
        """Write every machined piece of ``output`` into the directory ``path``.

        Returns:
            Paths of the files written, in piece order.
        """
        path.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for machining in output.machining:
            piece = machining.piece
            if not machining.face_operations:
                logger.debug("Piece %s has no face operations; no DXF written", piece.id)
                continue
            target = path / dxf_filename(
                piece.name, piece.id, piece.material.name, piece.material.thickness
            )
            target.write_text(self.render(machining), encoding="utf-8")
            written.append(target)
        logger.info("Wrote %d DXF files to %s", len(written), path)
        return written

    def export_string(self, output: ProjectPlan) -> str:
        raise NotImplementedError("DXF export writes one document per piece; use render()")
