"""Domain entities: pieces, modules and the factory catalog."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .exceptions import UnknownCatalogItemError
from .value_objects import (
    BackMounting,
    CostSettings,
    CutDimensions,
    DoorInstallation,
    DrawerSystem,
    EdgeSlot,
    Machine,
    MachineType,
    Material,
    MaterialKind,
    PieceOverride,
    PieceRole,
    ToolDepths,
    Zone,
)

# Changing any of these changes which pieces a module generates, so it
# invalidates the module's manual overrides.
APERTURE_FIELDS = frozenset(
    {
        "door_count",
        "drawer_count",
        "drawer_system_id",
        "hinge_id",
        "shelf_count",
        "slide_id",
        "zone",
    }
)


def piece_id(module_id: str, role: PieceRole, ordinal: int = 1) -> str:
    return f"{module_id}-{role.value}-{ordinal}"


@dataclass(frozen=True)
class Piece:
    """A panel in the cut list.

    Final dimensions are the finished, banded size. Cut dimensions are
    derived on demand from the edge slots.

    Attributes:
        id: Stable id, ``<module id>-<role>-<ordinal>``.
        module_id: Owning module.
        name: Display name.
        role: Structural role assigned at generation time.
        final_width: Finished width in mm.
        final_height: Finished height in mm.
        material: Board material the piece is cut from.
        quantity: Number of identical copies.
        edge_l1: Band on the first width-axis edge (top).
        edge_l2: Band on the second width-axis edge (bottom).
        edge_a1: Band on the first height-axis edge (left).
        edge_a2: Band on the second height-axis edge (right).
        category: Reporting group, usually the module zone.
    """

    id: str
    module_id: str
    name: str
    role: PieceRole
    final_width: float
    final_height: float
    material: Material
    quantity: int = 1
    edge_l1: Material | None = None
    edge_l2: Material | None = None
    edge_a1: Material | None = None
    edge_a2: Material | None = None
    category: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"Piece '{self.id}' quantity must be at least 1")
        if self.final_width < 0 or self.final_height < 0:
            raise ValueError(f"Piece '{self.id}' has negative final dimensions")
        for slot in EdgeSlot:
            band = self.edge(slot)
            if band is not None and not band.is_edge:
                raise ValueError(
                    f"Piece '{self.id}' slot {slot.value} holds non-edge material '{band.id}'"
                )

    def edge(self, slot: EdgeSlot) -> Material | None:
        return getattr(self, f"edge_{slot.value}")

    def with_edge(self, slot: EdgeSlot, band: Material | None) -> Piece:
        return replace(self, **{f"edge_{slot.value}": band})

    @property
    def edges(self) -> dict[EdgeSlot, Material | None]:
        return {slot: self.edge(slot) for slot in EdgeSlot}

    @property
    def cut_dimensions(self) -> CutDimensions:
        from .services.dimension_resolver import resolve

        return resolve(self)

    @property
    def cut_width(self) -> float:
        return self.cut_dimensions.cut_width

    @property
    def cut_height(self) -> float:
        return self.cut_dimensions.cut_height

    @property
    def thickness(self) -> float:
        return self.material.thickness


@dataclass(frozen=True)
class ModuleSpec:
    """Parametric description of one cabinet module.

    Attributes:
        id: Module id, used as the prefix of its piece ids.
        zone: BASE, WALL or TOWER.
        width: Outer width in mm.
        height: Carcass height in mm.
        depth: Carcass depth in mm.
        door_count: Number of doors.
        drawer_count: Number of drawers.
        drawer_system_id: Catalog id of the drawer box system.
        back_mounting: How the back panel is fitted.
        hinge_id: Catalog id of the hinge hardware.
        slide_id: Catalog id of the drawer runner hardware.
        leg_id: Catalog id of the leg hardware (BASE only).
        template_id: Template the module was created from.
        shelf_count: Number of adjustable shelves, None for the zone default.
        board_id: Board override; the factory default board is used when None.
        overrides: Manual piece edits replayed after regeneration.
    """

    id: str
    zone: Zone
    width: float
    height: float
    depth: float
    door_count: int = 0
    drawer_count: int = 0
    drawer_system_id: str | None = None
    back_mounting: BackMounting = BackMounting.INSET
    hinge_id: str | None = None
    slide_id: str | None = None
    leg_id: str | None = None
    template_id: str | None = None
    shelf_count: int | None = None
    board_id: str | None = None
    overrides: tuple[PieceOverride, ...] = ()

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError(f"Module '{self.id}' dimensions must be positive")
        if self.door_count < 0 or self.drawer_count < 0:
            raise ValueError(f"Module '{self.id}' door and drawer counts cannot be negative")
        if self.shelf_count is not None and self.shelf_count < 0:
            raise ValueError(f"Module '{self.id}' shelf count cannot be negative")

    @property
    def aperture_signature(self) -> tuple[Any, ...]:
        """Values of the fields that decide which pieces exist."""
        return tuple(getattr(self, name) for name in sorted(APERTURE_FIELDS))

    @property
    def has_overrides(self) -> bool:
        return bool(self.overrides)


@dataclass(frozen=True)
class EdgeRules:
    """Which edge band goes where on carcass pieces.

    Each value is an EDGE material id, or None for an unbanded edge.
    """

    doors: str | None = None
    visible: str | None = None
    internal: str | None = None


@dataclass(frozen=True)
class CarcassSettings:
    """Project-wide construction choices applied by the piece generator.

    Attributes:
        board_id: Default carcass board.
        back_board_id: Back panel board, the carcass board when None.
        edge_rules: Edge band per edge class.
        drawer_edge_id: Band used on drawer boxes, a board-thickness band when None.
        door_installation: Overlay or inset doors.
        door_gap: Gap around doors in mm.
        stretcher_height: Height of BASE top stretchers.
        tower_shelf_count: Shelves in a TOWER when the module does not say.
        shelf_setback: Shelf depth reduction from the carcass depth.
        shelf_clearance: Shelf width reduction from the internal width.
        overlay_door_reduction: Height taken off overlay doors.
    """

    board_id: str
    back_board_id: str | None = None
    edge_rules: EdgeRules = field(default_factory=EdgeRules)
    drawer_edge_id: str | None = None
    door_installation: DoorInstallation = DoorInstallation.FULL_OVERLAY
    door_gap: float = 3.0
    stretcher_height: float = 100.0
    tower_shelf_count: int = 3
    shelf_setback: float = 20.0
    shelf_clearance: float = 2.0
    overlay_door_reduction: float = 5.0


@dataclass(frozen=True)
class FactoryCatalog:
    """In-memory factory data: materials, hardware, machines and rates."""

    materials: Mapping[str, Material]
    carcass: CarcassSettings
    drawer_systems: Mapping[str, DrawerSystem] = field(default_factory=dict)
    machines: tuple[Machine, ...] = ()
    cost: CostSettings = field(default_factory=CostSettings)
    tool_depths: ToolDepths = field(default_factory=ToolDepths)

    def material(self, material_id: str) -> Material:
        try:
            return self.materials[material_id]
        except KeyError:
            raise UnknownCatalogItemError(material_id, "material") from None

    def _of_kind(self, material_id: str, kind: MaterialKind) -> Material:
        material = self.material(material_id)
        if material.kind is not kind:
            raise UnknownCatalogItemError(material_id, f"{kind.value} material")
        return material

    def board(self, material_id: str) -> Material:
        return self._of_kind(material_id, MaterialKind.BOARD)

    def edge(self, material_id: str | None) -> Material | None:
        """Edge band by id; None stays None (unbanded)."""
        if material_id is None:
            return None
        return self._of_kind(material_id, MaterialKind.EDGE)

    def hardware(self, material_id: str) -> Material:
        return self._of_kind(material_id, MaterialKind.HARDWARE)

    def board_for(self, module: ModuleSpec) -> Material:
        return self.board(module.board_id or self.carcass.board_id)

    def back_board(self) -> Material:
        return self.board(self.carcass.back_board_id or self.carcass.board_id)

    def drawer_system(self, system_id: str) -> DrawerSystem:
        try:
            return self.drawer_systems[system_id]
        except KeyError:
            raise UnknownCatalogItemError(system_id, "drawer_system") from None

    def machine(self, machine_type: MachineType) -> Machine | None:
        """First machine of the given type, or None if the factory has none."""
        return next((m for m in self.machines if m.machine_type is machine_type), None)

    @property
    def edge_materials(self) -> dict[str, Material]:
        return {m.id: m for m in self.materials.values() if m.is_edge}

    def tool_depths_for(self, *hardware_ids: str | None) -> ToolDepths:
        """Factory tool depths merged with the install profiles of the given hardware."""
        depths = self.tool_depths
        for hardware_id in hardware_ids:
            if hardware_id is None:
                continue
            install = self.hardware(hardware_id).install
            if install is not None:
                depths = depths.merged(install.tool_depths)
        return depths
