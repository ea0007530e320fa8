"""Role-based machining plan for a module's piece list."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...entities import Piece
from ...value_objects import (
    HardwareAssignment,
    HingeSide,
    HingeSpec,
    MachiningOperation,
    MinifixHorizontalSpec,
    MinifixVerticalSpec,
    PieceGeometry,
    PieceRole,
    ShelfPinSpec,
    SlideSpec,
    ToolDepths,
)
from ..cut_list import PieceList
from .constants import (
    MINIFIX_CONNECTION_OFFSET,
    SECONDS_PER_OPERATION,
    SLIDE_REAR_CLEARANCE,
    STANDARD_SLIDE_LENGTHS,
)
from .operations import MachiningCoordinateGenerator

logger = logging.getLogger(__name__)

__all__ = ["MachiningPlanner", "PieceMachining"]


@dataclass(frozen=True)
class PieceMachining:
    """Validated operations for one piece."""

    piece: Piece
    geometry: PieceGeometry
    operations: tuple[MachiningOperation, ...]

    @property
    def face_operations(self) -> tuple[MachiningOperation, ...]:
        return tuple(op for op in self.operations if not op.face.is_edge)

    @property
    def edge_operations(self) -> tuple[MachiningOperation, ...]:
        return tuple(op for op in self.operations if op.face.is_edge)

    @property
    def estimated_seconds(self) -> int:
        return len(self.operations) * SECONDS_PER_OPERATION


class MachiningPlanner:
    """Decides which operation families apply to each piece.

    Pieces are machined at their cut size, so coordinates refer to the raw
    panel before edge banding.

    - DOOR: hinge cups, hinges on alternating sides for paired doors.
    - LATERAL: Minifix inserts at floor and top joints, System32 rows when
      the module has shelves, slide mounts when it has drawers.
    - FLOOR / CEILING: Minifix cams and bolts on both ends.
    """

    def plan(
        self,
        piece_list: PieceList,
        assignment: HardwareAssignment,
        depths: ToolDepths,
    ) -> list[PieceMachining]:
        generator = MachiningCoordinateGenerator(depths)
        has_shelves = any(p.role is PieceRole.SHELF for p in piece_list.pieces)
        door_index = 0
        plans: list[PieceMachining] = []

        for piece in piece_list.pieces:
            geometry = self._geometry(piece)
            if geometry is None:
                continue
            match piece.role:
                case PieceRole.DOOR if assignment.hinges is not None:
                    side = HingeSide.LEFT if door_index % 2 == 0 else HingeSide.RIGHT
                    door_index += 1
                    ops = generator.generate(
                        geometry, HingeSpec(count=assignment.hinges.per_door, side=side)
                    )
                case PieceRole.LATERAL:
                    ops = self._lateral(generator, geometry, has_shelves, assignment)
                case PieceRole.FLOOR | PieceRole.CEILING:
                    ops = self._horizontal(generator, geometry)
                case _:
                    continue
            plans.append(PieceMachining(piece=piece, geometry=geometry, operations=tuple(ops)))

        logger.debug(
            "Module %s: %d pieces machined, %d operations",
            piece_list.module_id,
            len(plans),
            sum(len(p.operations) for p in plans),
        )
        return plans

    def _geometry(self, piece: Piece) -> PieceGeometry | None:
        cut = piece.cut_dimensions
        if cut.cut_width <= 0 or cut.cut_height <= 0 or piece.thickness <= 0:
            logger.warning("Piece %s has no machinable area; skipping", piece.id)
            return None
        return PieceGeometry(
            width=cut.cut_width,
            height=cut.cut_height,
            thickness=piece.thickness,
            piece_id=piece.id,
        )

    def _lateral(
        self,
        generator: MachiningCoordinateGenerator,
        geometry: PieceGeometry,
        has_shelves: bool,
        assignment: HardwareAssignment,
    ) -> list[MachiningOperation]:
        joints = (geometry.thickness / 2, geometry.height - geometry.thickness / 2)
        ops: list[MachiningOperation] = []
        for x in (MINIFIX_CONNECTION_OFFSET, geometry.width - MINIFIX_CONNECTION_OFFSET):
            ops.extend(
                generator.generate(geometry, MinifixVerticalSpec(y_positions=joints, x_offset=x))
            )
        if has_shelves:
            ops.extend(generator.generate(geometry, ShelfPinSpec(back_row=True)))
        if assignment.slides is not None and assignment.slides.pairs > 0:
            slide_length = self._slide_length(geometry.width)
            if slide_length is None:
                logger.warning(
                    "Lateral %s is too shallow for standard slides; no mounts drilled",
                    geometry.piece_id,
                )
            else:
                pitch = geometry.height / assignment.slides.pairs
                centres = tuple((i + 0.5) * pitch for i in range(assignment.slides.pairs))
                ops.extend(
                    generator.generate(
                        geometry, SlideSpec(y_positions=centres, slide_length=slide_length)
                    )
                )
        return ops

    def _horizontal(
        self, generator: MachiningCoordinateGenerator, geometry: PieceGeometry
    ) -> list[MachiningOperation]:
        ops: list[MachiningOperation] = []
        for side in (HingeSide.LEFT, HingeSide.RIGHT):
            for y in (MINIFIX_CONNECTION_OFFSET, geometry.height - MINIFIX_CONNECTION_OFFSET):
                ops.extend(
                    generator.generate(geometry, MinifixHorizontalSpec(side=side, y_position=y))
                )
        return ops

    @staticmethod
    def _slide_length(depth: float) -> float | None:
        fitting = [length for length in STANDARD_SLIDE_LENGTHS if length <= depth - SLIDE_REAR_CLEARANCE]
        return fitting[-1] if fitting else None
