"""Project cost estimate: materials, hardware, consumables and machine time."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from ..entities import ModuleSpec, Piece
from ..exceptions import UnknownCatalogItemError
from ..value_objects import (
    CostBreakdown,
    CostSettings,
    CostStats,
    CostTotals,
    EdgeSlot,
    HardwareLine,
    Machine,
    MachineOperationCost,
    MachineType,
    Material,
)
from .dimension_resolver import round_half_up
from .hardware_rules import HardwareRuleEngine, door_height_for

logger = logging.getLogger(__name__)

__all__ = [
    "CostAggregator",
    "cost_engine_hinges_per_door",
    "machine_operation",
    "screw_count",
]

SCREWS_PER_HINGE = 4
SCREWS_PER_SLIDE_PAIR = 12
SCREWS_PER_MODULE = 8


def cost_engine_hinges_per_door(door_height: float) -> int:
    """Hinges per door as priced by the cost estimate.

    This bracket table differs from ``HardwareRuleEngine.hinges``; both are
    kept as separate rules.
    """
    if door_height <= 0:
        return 0
    if door_height < 900:
        return 2
    if door_height <= 1600:
        return 3
    if door_height <= 2100:
        return 4
    return 5


def machine_operation(
    meters: float, machine: Machine, energy_price: float
) -> MachineOperationCost:
    """Time and cost for ``machine`` to process ``meters`` of material.

    time (h) = meters / speed (m/min) / 60
    cost = time * (power_kw * energy_price + hourly_rate)

    Non-positive length or speed yields zero rather than NaN or infinity.
    """
    if meters <= 0 or machine.processing_speed <= 0:
        return MachineOperationCost()
    hours = meters / machine.processing_speed / 60
    cost = hours * (machine.power_kw * energy_price + machine.operation_cost_per_hour)
    if not (math.isfinite(hours) and math.isfinite(cost)):
        logger.warning("Machine %s produced a non-finite estimate; ignoring", machine.id)
        return MachineOperationCost()
    return MachineOperationCost(
        time_hours=round_half_up(hours, 2), cost=round_half_up(cost, 2)
    )


def screw_count(hinges: int, slides: int, modules: int) -> int:
    return (
        hinges * SCREWS_PER_HINGE
        + slides * SCREWS_PER_SLIDE_PAIR
        + modules * SCREWS_PER_MODULE
    )


@dataclass
class _Tally:
    materials: float = 0.0
    hardware: float = 0.0
    consumables: float = 0.0
    edge_meters: float = 0.0
    cutting_meters: float = 0.0
    hinges: int = 0
    slides: int = 0
    lines: dict[str, list[float]] = field(default_factory=dict)

    def add_hardware(self, item: Material, count: int) -> None:
        cost = count * item.unit_cost
        line = self.lines.setdefault(item.name, [0, 0.0])
        line[0] += count
        line[1] += cost
        self.hardware += cost


class CostAggregator:
    """Rolls pieces and modules up into a cost breakdown and suggested price."""

    def __init__(self, rules: HardwareRuleEngine | None = None) -> None:
        self._rules = rules or HardwareRuleEngine()

    def aggregate(
        self,
        pieces: Iterable[Piece],
        modules: Sequence[ModuleSpec],
        materials: Mapping[str, Material],
        machines: Sequence[Machine],
        global_config: CostSettings,
    ) -> CostBreakdown:
        """Compute the cost breakdown.

        Args:
            pieces: Board pieces of all modules.
            modules: Modules the pieces belong to.
            materials: Catalog by id. Prices found here win over the ones
                stored on the pieces.
            machines: Workshop machines. The first CUTTING and EDGE_BANDING
                machines are used.
            global_config: Energy price, margin and consumable rates.

        Returns:
            CostBreakdown with amounts rounded to 2 decimals.
        """
        pieces = list(pieces)
        tally = _Tally()

        for piece in pieces:
            self._add_piece(tally, piece, materials)

        for module in modules:
            self._add_module_hardware(tally, module, pieces, materials)
            tally.consumables += global_config.consumables.glue_flat_rate_per_module

        screws = screw_count(tally.hinges, tally.slides, len(modules))
        tally.consumables += screws * global_config.consumables.screw_unit_price

        operations = 0.0
        for machine_type, meters in (
            (MachineType.CUTTING, tally.cutting_meters),
            (MachineType.EDGE_BANDING, tally.edge_meters),
        ):
            machine = next((m for m in machines if m.machine_type is machine_type), None)
            if machine is None:
                logger.debug("No %s machine configured; skipping", machine_type.value)
                continue
            operations += machine_operation(
                meters, machine, global_config.energy_price_per_kwh
            ).cost

        total = tally.materials + tally.hardware + tally.consumables + operations
        suggested = total / (1 - global_config.profit_margin / 100)

        return CostBreakdown(
            materials=round_half_up(tally.materials, 2),
            hardware=round_half_up(tally.hardware, 2),
            consumables=round_half_up(tally.consumables, 2),
            operations=round_half_up(operations, 2),
            totals=CostTotals(
                total_cost=round_half_up(total, 2),
                suggested_price=round_half_up(suggested, 2),
                margin=global_config.profit_margin,
            ),
            stats=CostStats(
                hinges=tally.hinges,
                slides=tally.slides,
                screws=screws,
                edge_meters=round_half_up(tally.edge_meters, 1),
                cutting_meters=round_half_up(tally.cutting_meters, 1),
            ),
            hardware_lines=tuple(
                HardwareLine(name=name, count=int(count), cost=round_half_up(cost, 2))
                for name, (count, cost) in tally.lines.items()
            ),
        )

    def _add_piece(
        self, tally: _Tally, piece: Piece, materials: Mapping[str, Material]
    ) -> None:
        board = materials.get(piece.material.id, piece.material)
        area_m2 = piece.final_height * piece.final_width * piece.quantity / 1_000_000
        tally.materials += area_m2 * board.unit_cost
        tally.cutting_meters += (
            (2 * piece.final_height + 2 * piece.final_width) * piece.quantity / 1000
        )
        for slot, band in piece.edges.items():
            if band is None:
                continue
            band = materials.get(band.id, band)
            along = piece.final_width if slot in (EdgeSlot.L1, EdgeSlot.L2) else piece.final_height
            meters = along / 1000 * piece.quantity
            tally.materials += meters * band.unit_cost
            tally.edge_meters += meters

    def _add_module_hardware(
        self,
        tally: _Tally,
        module: ModuleSpec,
        pieces: Sequence[Piece],
        materials: Mapping[str, Material],
    ) -> None:
        if module.door_count > 0:
            per_door = cost_engine_hinges_per_door(door_height_for(module, pieces))
            count = per_door * module.door_count
            tally.hinges += count
            if module.hinge_id is not None:
                tally.add_hardware(_lookup(materials, module.hinge_id), count)

        if module.drawer_count > 0:
            tally.slides += module.drawer_count
            if module.slide_id is not None:
                tally.add_hardware(_lookup(materials, module.slide_id), module.drawer_count)

        if module.leg_id is not None:
            legs = self._rules.legs(module.width, module.zone)
            if legs is not None:
                tally.add_hardware(_lookup(materials, module.leg_id), legs.quantity)


def _lookup(materials: Mapping[str, Material], material_id: str) -> Material:
    try:
        return materials[material_id]
    except KeyError:
        raise UnknownCatalogItemError(material_id, "hardware") from None
