"""Cost estimate results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MachineOperationCost:
    """Running time and cost of one machine pass, both rounded to cents/hundredths."""

    time_hours: float = 0.0
    cost: float = 0.0


@dataclass(frozen=True)
class HardwareLine:
    """Hardware cost grouped by hardware name."""

    name: str
    count: int
    cost: float


@dataclass(frozen=True)
class CostTotals:
    total_cost: float
    suggested_price: float
    margin: float


@dataclass(frozen=True)
class CostStats:
    """Quantities behind the estimate.

    Attributes:
        hinges: Hinges counted by the cost bracket table.
        slides: Slide pairs (one per drawer).
        screws: Screws from the hinge/slide/module formula.
        edge_meters: Edge banding length, rounded to 0.1 m.
        cutting_meters: Total piece perimeter, rounded to 0.1 m.
    """

    hinges: int
    slides: int
    screws: int
    edge_meters: float
    cutting_meters: float


@dataclass(frozen=True)
class CostBreakdown:
    """Full cost estimate for a set of modules.

    Amounts are rounded to 2 decimals.
    """

    materials: float
    hardware: float
    consumables: float
    operations: float
    totals: CostTotals
    stats: CostStats
    hardware_lines: tuple[HardwareLine, ...] = ()
