"""Machining operation families.

Each family is a pure function taking the piece geometry, a connector
spec and the tool depth table, and returning validated operations in
piece-local coordinates (origin bottom-left, +x along width, +y along
height).
"""

from __future__ import annotations

from ...exceptions import HingeLayoutError
from ...value_objects import (
    HingeSide,
    HingeSpec,
    MachineFace,
    MachiningFeature,
    MachiningOperation,
    MinifixHorizontalSpec,
    MinifixVerticalSpec,
    OperationKind,
    PieceGeometry,
    ShelfPinSpec,
    SlideSpec,
    ToolDepths,
    drill_tool,
    guide_tool,
    pocket_tool,
)
from .constants import BOUNDS_TOLERANCE
from .validation import validate_operations

__all__ = [
    "MachiningCoordinateGenerator",
    "hinge_cup_positions",
    "hinge_operations",
    "minifix_horizontal_operations",
    "minifix_vertical_operations",
    "slide_operations",
    "system32_operations",
]


def _drill(
    feature: MachiningFeature,
    diameter: float,
    x: float,
    y: float,
    depths: ToolDepths,
    description: str,
    face: MachineFace = MachineFace.FRONT,
    tool_id: str | None = None,
    kind: OperationKind = OperationKind.DRILL,
) -> MachiningOperation:
    tool_id = tool_id or drill_tool(diameter)
    return MachiningOperation(
        kind=kind,
        feature=feature,
        diameter=diameter,
        depth=depths.depth_for(tool_id),
        x=x,
        y=y,
        face=face,
        tool_id=tool_id,
        description=description,
    )


def hinge_cup_positions(height: float, spec: HingeSpec) -> list[float]:
    """Cup centre heights: first at the bottom margin, last at height minus the top margin."""
    first = spec.bottom_margin
    last = height - spec.top_margin
    if last <= first:
        raise HingeLayoutError(height, spec.bottom_margin, spec.top_margin)
    step = (last - first) / (spec.count - 1)
    positions = [first + i * step for i in range(spec.count - 1)]
    positions.append(last)
    return positions


def hinge_operations(
    geometry: PieceGeometry, spec: HingeSpec, depths: ToolDepths
) -> list[MachiningOperation]:
    """Hinge cups with their two pilot holes each, on the door's front face."""
    if spec.side is HingeSide.LEFT:
        x = spec.edge_offset
    else:
        x = geometry.width - spec.edge_offset

    ops: list[MachiningOperation] = []
    for index, y in enumerate(hinge_cup_positions(geometry.height, spec), start=1):
        ops.append(
            _drill(
                MachiningFeature.HINGE_CUP,
                spec.cup_diameter,
                x,
                y,
                depths,
                f"Hinge cup {index}",
            )
        )
        for label, offset in (("lower", -spec.pilot_offset), ("upper", spec.pilot_offset)):
            ops.append(
                _drill(
                    MachiningFeature.HINGE_PILOT,
                    spec.pilot_diameter,
                    x,
                    y + offset,
                    depths,
                    f"Hinge {index} {label} pilot",
                    tool_id=guide_tool(spec.pilot_diameter),
                )
            )
    return validate_operations(geometry, ops)


def minifix_horizontal_operations(
    geometry: PieceGeometry, spec: MinifixHorizontalSpec, depths: ToolDepths
) -> list[MachiningOperation]:
    """Cam pocket on the face plus the bolt hole in the matching A edge."""
    if spec.side is HingeSide.LEFT:
        cam_x, bolt_face = spec.cam_offset, MachineFace.EDGE_A1
    else:
        cam_x, bolt_face = geometry.width - spec.cam_offset, MachineFace.EDGE_A2

    ops = [
        _drill(
            MachiningFeature.MINIFIX_CAM,
            spec.cam_diameter,
            cam_x,
            spec.y_position,
            depths,
            f"Minifix cam ({spec.side.value})",
            tool_id=pocket_tool(spec.cam_diameter),
            kind=OperationKind.POCKET,
        ),
        # Edge face coordinates: x runs along the edge, y across the thickness.
        _drill(
            MachiningFeature.MINIFIX_BOLT,
            spec.bolt_diameter,
            spec.y_position,
            geometry.thickness / 2,
            depths,
            f"Minifix bolt ({spec.side.value})",
            face=bolt_face,
        ),
    ]
    return validate_operations(geometry, ops)


def minifix_vertical_operations(
    geometry: PieceGeometry, spec: MinifixVerticalSpec, depths: ToolDepths
) -> list[MachiningOperation]:
    """Insert holes on a lateral, one per connection height."""
    ops = [
        _drill(
            MachiningFeature.MINIFIX_INSERT,
            spec.insert_diameter,
            spec.x_offset,
            y,
            depths,
            f"Minifix insert at {y:g}",
        )
        for y in spec.y_positions
    ]
    return validate_operations(geometry, ops)


def system32_operations(
    geometry: PieceGeometry, spec: ShelfPinSpec, depths: ToolDepths
) -> list[MachiningOperation]:
    """Shelf-pin rows at 32 mm pitch between the top and bottom clearances."""
    top = geometry.height - spec.edge_clearance
    rows = [spec.x_offset]
    if spec.back_row:
        rows.append(geometry.width - spec.x_offset)

    ops: list[MachiningOperation] = []
    for x in rows:
        step = 0
        y = spec.edge_clearance
        while y <= top + BOUNDS_TOLERANCE:
            ops.append(
                _drill(
                    MachiningFeature.SHELF_PIN,
                    spec.diameter,
                    x,
                    y,
                    depths,
                    f"Shelf pin x={x:g} y={y:g}",
                )
            )
            step += 1
            y = spec.edge_clearance + step * spec.pitch
    return validate_operations(geometry, ops)


def slide_operations(
    geometry: PieceGeometry, spec: SlideSpec, depths: ToolDepths
) -> list[MachiningOperation]:
    """Front and rear runner mounting holes for each drawer centre line."""
    rear_x = spec.front_offset + spec.slide_length - spec.rear_offset
    ops: list[MachiningOperation] = []
    for index, y in enumerate(spec.y_positions, start=1):
        for label, x in (("front", spec.front_offset), ("rear", rear_x)):
            ops.append(
                _drill(
                    MachiningFeature.SLIDE_MOUNT,
                    spec.diameter,
                    x,
                    y,
                    depths,
                    f"Slide {index} {label} mount",
                )
            )
    return validate_operations(geometry, ops)


class MachiningCoordinateGenerator:
    """Dispatches a connector spec to its operation family."""

    def __init__(self, depths: ToolDepths) -> None:
        self.depths = depths

    def generate(
        self,
        geometry: PieceGeometry,
        spec: HingeSpec
        | MinifixHorizontalSpec
        | MinifixVerticalSpec
        | ShelfPinSpec
        | SlideSpec,
    ) -> list[MachiningOperation]:
        match spec:
            case HingeSpec():
                return hinge_operations(geometry, spec, self.depths)
            case MinifixHorizontalSpec():
                return minifix_horizontal_operations(geometry, spec, self.depths)
            case MinifixVerticalSpec():
                return minifix_vertical_operations(geometry, spec, self.depths)
            case ShelfPinSpec():
                return system32_operations(geometry, spec, self.depths)
            case SlideSpec():
                return slide_operations(geometry, spec, self.depths)
        raise TypeError(f"Unsupported machining spec: {spec!r}")
