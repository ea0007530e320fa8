"""CNC machining value objects.

Coordinates are piece-local in millimeters with the origin at the
bottom-left corner of the machined face, +x along width and +y along height.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from ..exceptions import MissingToolDepthError


class OperationKind(str, Enum):
    DRILL = "drill"
    POCKET = "pocket"
    ROUTE = "route"


class MachiningFeature(str, Enum):
    """What a machining operation is for."""

    HINGE_CUP = "hinge_cup"
    HINGE_PILOT = "hinge_pilot"
    MINIFIX_CAM = "minifix_cam"
    MINIFIX_BOLT = "minifix_bolt"
    MINIFIX_INSERT = "minifix_insert"
    SHELF_PIN = "shelf_pin"
    SLIDE_MOUNT = "slide_mount"


class MachineFace(str, Enum):
    """Face of the panel being machined.

    FRONT and BACK are the large faces. Edge faces are named after the
    edge slot they sit on.
    """

    FRONT = "front"
    BACK = "back"
    EDGE_L1 = "edge_l1"
    EDGE_L2 = "edge_l2"
    EDGE_A1 = "edge_a1"
    EDGE_A2 = "edge_a2"

    @property
    def is_edge(self) -> bool:
        return self not in (MachineFace.FRONT, MachineFace.BACK)


class HingeSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"


def drill_tool(diameter: float) -> str:
    """Tool/layer id for a drill bit, e.g. DRILL_35MM."""
    return f"DRILL_{diameter:g}MM"


def guide_tool(diameter: float) -> str:
    """Tool/layer id for a pilot (guide) drill, e.g. GUIDE_2MM."""
    return f"GUIDE_{diameter:g}MM"


def pocket_tool(diameter: float) -> str:
    return f"POCKET_{diameter:g}MM"


@dataclass(frozen=True)
class MachiningOperation:
    """A single CNC operation.

    Attributes:
        kind: DRILL, POCKET or ROUTE.
        feature: Hardware feature the operation produces.
        diameter: Tool diameter in mm.
        depth: Plunge depth (z) in mm.
        x: X coordinate of the tool center.
        y: Y coordinate of the tool center.
        face: Face being machined.
        tool_id: CNC tool id, also used as the DXF layer name.
        description: Human-readable label.
    """

    kind: OperationKind
    feature: MachiningFeature
    diameter: float
    depth: float
    x: float
    y: float
    face: MachineFace
    tool_id: str
    description: str = ""

    @property
    def radius(self) -> float:
        return self.diameter / 2


@dataclass(frozen=True)
class PieceGeometry:
    """Outline of a piece as seen by the machining generator."""

    width: float
    height: float
    thickness: float
    piece_id: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.thickness <= 0:
            raise ValueError("Piece geometry must have positive width, height and thickness")

    def face_bounds(self, face: MachineFace) -> tuple[float, float]:
        """Width and height of the rectangle a face presents to the tool."""
        if face in (MachineFace.FRONT, MachineFace.BACK):
            return self.width, self.height
        if face in (MachineFace.EDGE_L1, MachineFace.EDGE_L2):
            return self.width, self.thickness
        return self.height, self.thickness


@dataclass(frozen=True)
class BoundsViolation:
    """An operation whose tool circle leaves its face."""

    operation: MachiningOperation
    axis: str
    coordinate: float
    minimum: float
    maximum: float

    def __str__(self) -> str:
        op = self.operation
        return (
            f"{op.description or op.feature.value} on {op.face.value}: "
            f"{self.axis}={self.coordinate:g} outside [{self.minimum:g}, {self.maximum:g}]"
        )


@dataclass(frozen=True)
class ToolDepths:
    """Drilling depth per tool id, with no fallback values."""

    depths: Mapping[str, float] = field(default_factory=dict)

    def depth_for(self, tool_id: str) -> float:
        try:
            return self.depths[tool_id]
        except KeyError:
            raise MissingToolDepthError(tool_id) from None

    def merged(self, overrides: Mapping[str, float] | None) -> ToolDepths:
        """Return a copy where ``overrides`` win over existing entries."""
        if not overrides:
            return self
        return ToolDepths(depths={**self.depths, **overrides})


@dataclass(frozen=True)
class HingeSpec:
    """Concealed hinge drilling pattern for a door.

    Attributes:
        count: Number of hinges (at least 2).
        side: Door edge carrying the hinges.
        bottom_margin: Distance from the bottom edge to the first cup center.
        top_margin: Distance from the top edge to the last cup center.
        edge_offset: Cup center distance from the hinge-side edge.
        cup_diameter: Cup bore diameter.
        pilot_diameter: Mounting screw pilot diameter.
        pilot_offset: Vertical distance from cup center to each pilot.
    """

    count: int
    side: HingeSide = HingeSide.LEFT
    bottom_margin: float = 100.0
    top_margin: float = 100.0
    edge_offset: float = 22.5
    cup_diameter: float = 35.0
    pilot_diameter: float = 2.0
    pilot_offset: float = 17.5

    def __post_init__(self) -> None:
        if self.count < 2:
            raise ValueError("A door needs at least 2 hinges")


@dataclass(frozen=True)
class MinifixHorizontalSpec:
    """Cam lock on a horizontal piece (floor, ceiling, fixed shelf).

    Attributes:
        side: Which end of the piece connects to a lateral.
        y_position: Position of the connection along the piece height.
    """

    side: HingeSide
    y_position: float
    cam_offset: float = 34.0
    cam_diameter: float = 15.0
    bolt_diameter: float = 8.0


@dataclass(frozen=True)
class MinifixVerticalSpec:
    """Insert holes on a lateral receiving Minifix bolts."""

    y_positions: tuple[float, ...]
    x_offset: float = 34.0
    insert_diameter: float = 5.0


@dataclass(frozen=True)
class ShelfPinSpec:
    """System32 shelf-pin rows on a lateral."""

    x_offset: float = 37.0
    edge_clearance: float = 50.0
    pitch: float = 32.0
    diameter: float = 5.0
    back_row: bool = False

    def __post_init__(self) -> None:
        if self.pitch <= 0:
            raise ValueError("System32 pitch must be positive")


@dataclass(frozen=True)
class SlideSpec:
    """Drawer runner mounting holes, one front and one rear per drawer."""

    y_positions: tuple[float, ...]
    slide_length: float = 500.0
    front_offset: float = 37.0
    rear_offset: float = 32.0
    diameter: float = 5.0
