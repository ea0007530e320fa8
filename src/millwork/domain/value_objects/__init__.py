"""Value objects for the millwork domain.

All classes are immutable and re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Catalog: materials, machines, rates
from ._catalog import (
    ConsumablesRates,
    CostSettings,
    InstallProfile,
    Machine,
    MachineType,
    Material,
    MaterialKind,
)

# Pieces, modules and drawer systems
from ._pieces import (
    BackMounting,
    BottomConstruction,
    CutDimensions,
    CutListWarning,
    DoorInstallation,
    DrawerSystem,
    EdgeDiscounts,
    EdgeSlot,
    MelamineDrawerSystem,
    MetalDrawerSystem,
    PieceRole,
    Zone,
)

# Hardware quantities
from ._hardware import (
    HardwareAssignment,
    HingeAssignment,
    LegAssignment,
    SlideAssignment,
)

# Cost estimate results
from ._cost import (
    CostBreakdown,
    CostStats,
    CostTotals,
    HardwareLine,
    MachineOperationCost,
)

# Manual piece overrides
from ._overrides import (
    PieceOverride,
    SetEdge,
    SetFinalHeight,
    SetFinalWidth,
    SetQuantity,
)

# CNC machining
from ._machining import (
    BoundsViolation,
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

__all__ = [
    "BackMounting",
    "BottomConstruction",
    "BoundsViolation",
    "ConsumablesRates",
    "CostBreakdown",
    "CostSettings",
    "CostStats",
    "CostTotals",
    "CutDimensions",
    "CutListWarning",
    "DoorInstallation",
    "DrawerSystem",
    "EdgeDiscounts",
    "EdgeSlot",
    "HardwareAssignment",
    "HardwareLine",
    "HingeAssignment",
    "HingeSide",
    "HingeSpec",
    "InstallProfile",
    "LegAssignment",
    "Machine",
    "MachineFace",
    "MachineOperationCost",
    "MachineType",
    "MachiningFeature",
    "MachiningOperation",
    "Material",
    "MaterialKind",
    "MelamineDrawerSystem",
    "MetalDrawerSystem",
    "MinifixHorizontalSpec",
    "MinifixVerticalSpec",
    "OperationKind",
    "PieceGeometry",
    "PieceOverride",
    "PieceRole",
    "SetEdge",
    "SetFinalHeight",
    "SetFinalWidth",
    "SetQuantity",
    "ShelfPinSpec",
    "SlideAssignment",
    "SlideSpec",
    "ToolDepths",
    "Zone",
    "drill_tool",
    "guide_tool",
    "pocket_tool",
]
