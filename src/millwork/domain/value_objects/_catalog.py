"""Factory catalog value objects: materials, machines and cost rates."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class MaterialKind(str, Enum):
    """Catalog material kinds.

    BOARD is sheet stock, EDGE is edge banding, HARDWARE covers hinges,
    slides and legs priced per unit.
    """

    BOARD = "board"
    EDGE = "edge"
    HARDWARE = "hardware"


class MachineType(str, Enum):
    """Workshop machine roles used by the operations cost estimate."""

    CUTTING = "cutting"
    EDGE_BANDING = "edge_banding"
    CNC = "cnc"


@dataclass(frozen=True)
class InstallProfile:
    """Drilling depths a hardware item requires, keyed by tool id.

    Attributes:
        tool_depths: Mapping of tool id (e.g. "DRILL_35MM") to depth in mm.
    """

    tool_depths: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for tool_id, depth in self.tool_depths.items():
            if depth <= 0:
                raise ValueError(f"Depth for tool '{tool_id}' must be positive")


@dataclass(frozen=True)
class Material:
    """A catalog material.

    Attributes:
        id: Catalog id referenced by modules and piece edge slots.
        name: Display name.
        kind: BOARD, EDGE or HARDWARE.
        thickness: Thickness in mm (0 for hardware).
        unit_cost: Price per m2 (BOARD), per linear meter (EDGE) or per unit (HARDWARE).
        category: Free-form grouping used in reports.
        grain: True when the board has a grain direction cut optimizers must keep.
        install: Drilling depths for HARDWARE items that need machining.
    """

    id: str
    name: str
    kind: MaterialKind
    thickness: float = 0.0
    unit_cost: float = 0.0
    category: str = ""
    grain: bool = False
    install: InstallProfile | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Material id must not be empty")
        if self.thickness < 0:
            raise ValueError("Material thickness cannot be negative")
        if self.unit_cost < 0:
            raise ValueError("Material unit cost cannot be negative")
        if self.install is not None and self.kind is not MaterialKind.HARDWARE:
            raise ValueError("Only hardware materials carry an install profile")

    @property
    def is_edge(self) -> bool:
        return self.kind is MaterialKind.EDGE

    @classmethod
    def board_thickness_band(cls, thickness: float) -> "Material":
        """Edge band whose thickness matches the board, used by drawer boxes."""
        return cls(
            id=f"edge-{thickness:g}mm",
            name=f"Board-thickness band {thickness:g}mm",
            kind=MaterialKind.EDGE,
            thickness=thickness,
        )


@dataclass(frozen=True)
class Machine:
    """A workshop machine with its running costs.

    Attributes:
        id: Catalog id.
        name: Display name.
        machine_type: Role of the machine in the operations estimate.
        power_kw: Electrical consumption while running.
        operation_cost_per_hour: Maintenance, depreciation and labor per hour.
        processing_speed: Feed in meters per minute.
    """

    id: str
    name: str
    machine_type: MachineType
    power_kw: float
    operation_cost_per_hour: float
    processing_speed: float


@dataclass(frozen=True)
class ConsumablesRates:
    """Per-unit consumable prices."""

    screw_unit_price: float = 0.0
    glue_flat_rate_per_module: float = 0.0


@dataclass(frozen=True)
class CostSettings:
    """Global pricing settings.

    Attributes:
        energy_price_per_kwh: Electricity price.
        profit_margin: Margin on sale price, in percent (40 means cost is 60% of price).
        consumables: Consumable unit prices.
    """

    energy_price_per_kwh: float = 0.0
    profit_margin: float = 0.0
    consumables: ConsumablesRates = field(default_factory=ConsumablesRates)

    def __post_init__(self) -> None:
        if not 0 <= self.profit_margin < 100:
            raise ValueError("profit_margin must be in [0, 100)")
        if self.energy_price_per_kwh < 0:
            raise ValueError("energy_price_per_kwh cannot be negative")
