"""Piece roles, module enums, drawer systems and cut dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union


class Zone(str, Enum):
    """Kitchen zone a module belongs to."""

    BASE = "base"
    WALL = "wall"
    TOWER = "tower"


class PieceRole(str, Enum):
    """Structural role of a piece, assigned when the piece is generated."""

    LATERAL = "lateral"
    FLOOR = "floor"
    CEILING = "ceiling"
    SHELF = "shelf"
    STRETCHER = "stretcher"
    BACK = "back"
    DOOR = "door"
    DRAWER_SIDE = "drawer_side"
    DRAWER_FRONT = "drawer_front"
    DRAWER_BACK = "drawer_back"
    DRAWER_BOTTOM = "drawer_bottom"
    DRAWER_FACE = "drawer_face"


class BackMounting(str, Enum):
    """How the back panel is fitted.

    INSET: back sits between the laterals and stops one board short of the top.
    OVERLAY: back is nailed over the full rear of the carcass.
    """

    INSET = "inset"
    OVERLAY = "overlay"


class DoorInstallation(str, Enum):
    """Door fitting style."""

    FULL_OVERLAY = "full_overlay"
    INSET = "inset"


class BottomConstruction(str, Enum):
    """Melamine drawer bottom fitting."""

    GROOVED = "grooved"
    NAILED = "nailed"


class EdgeSlot(str, Enum):
    """Edge-band slots on a piece.

    L1/L2 run along the width axis and consume height.
    A1/A2 run along the height axis and consume width.
    """

    L1 = "l1"
    L2 = "l2"
    A1 = "a1"
    A2 = "a2"


@dataclass(frozen=True)
class MetalDrawerSystem:
    """Metal box drawer (Tandembox style): only bottom and back are cut."""

    id: str
    name: str
    slide_clearance: float
    backend_clearance: float
    kind: Literal["metal"] = "metal"


@dataclass(frozen=True)
class MelamineDrawerSystem:
    """Traditional melamine drawer box built from six cut pieces."""

    id: str
    name: str
    slide_clearance: float
    backend_clearance: float
    bottom_construction: BottomConstruction = BottomConstruction.GROOVED
    kind: Literal["melamine"] = "melamine"


DrawerSystem = Union[MetalDrawerSystem, MelamineDrawerSystem]


@dataclass(frozen=True)
class EdgeDiscounts:
    """Raw edge-band thickness subtracted from each axis, before flooring."""

    l1: float = 0.0
    l2: float = 0.0
    a1: float = 0.0
    a2: float = 0.0

    @property
    def height(self) -> float:
        return self.l1 + self.l2

    @property
    def width(self) -> float:
        return self.a1 + self.a2


@dataclass(frozen=True)
class CutDimensions:
    """Saw-cut dimensions of a piece.

    Attributes:
        cut_width: Final width minus A-edge thickness, floored at 0.
        cut_height: Final height minus L-edge thickness, floored at 0.
        discounts: Raw thicknesses subtracted per slot.
        floored: True when either axis would have gone negative.
    """

    cut_width: float
    cut_height: float
    discounts: EdgeDiscounts
    floored: bool = False


@dataclass(frozen=True)
class CutListWarning:
    """Non-fatal cut list issue surfaced to the caller."""

    piece_id: str
    message: str

    def __str__(self) -> str:
        return f"{self.piece_id}: {self.message}"
