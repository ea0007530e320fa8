"""Convert validated project configuration into domain objects."""

from millwork.application.config.schemas import (
    BoardMaterialConfig,
    EdgeMaterialConfig,
    FactoryConfig,
    HardwareMaterialConfig,
    MachineConfig,
    MaterialConfig,
    MelamineDrawerSystemConfig,
    MetalDrawerSystemConfig,
    ModuleConfig,
    OverrideConfig,
    ProjectConfiguration,
    SetEdgeConfig,
    SetFinalHeightConfig,
    SetFinalWidthConfig,
    SetQuantityConfig,
)
from millwork.domain.entities import (
    CarcassSettings,
    EdgeRules,
    FactoryCatalog,
    ModuleSpec,
)
from millwork.domain.value_objects import (
    ConsumablesRates,
    CostSettings,
    DrawerSystem,
    InstallProfile,
    Machine,
    Material,
    MaterialKind,
    MelamineDrawerSystem,
    MetalDrawerSystem,
    PieceOverride,
    SetEdge,
    SetFinalHeight,
    SetFinalWidth,
    SetQuantity,
    ToolDepths,
)


def config_to_material(config: MaterialConfig) -> Material:
    """Convert a material entry to a domain Material."""
    match config:
        case BoardMaterialConfig():
            return Material(
                id=config.id,
                name=config.name,
                kind=MaterialKind.BOARD,
                thickness=config.thickness,
                unit_cost=config.unit_cost,
                category=config.category,
                grain=config.grain,
            )
        case EdgeMaterialConfig():
            return Material(
                id=config.id,
                name=config.name,
                kind=MaterialKind.EDGE,
                thickness=config.thickness,
                unit_cost=config.unit_cost,
                category=config.category,
            )
        case HardwareMaterialConfig():
            return Material(
                id=config.id,
                name=config.name,
                kind=MaterialKind.HARDWARE,
                unit_cost=config.unit_cost,
                category=config.category,
                install=InstallProfile(dict(config.tool_depths)) if config.tool_depths else None,
            )
    raise TypeError(f"Unsupported material config: {config!r}")


def config_to_drawer_system(
    config: MetalDrawerSystemConfig | MelamineDrawerSystemConfig,
) -> DrawerSystem:
    if isinstance(config, MetalDrawerSystemConfig):
        return MetalDrawerSystem(
            id=config.id,
            name=config.name,
            slide_clearance=config.slide_clearance,
            backend_clearance=config.backend_clearance,
        )
    return MelamineDrawerSystem(
        id=config.id,
        name=config.name,
        slide_clearance=config.slide_clearance,
        backend_clearance=config.backend_clearance,
        bottom_construction=config.bottom_construction,
    )


def config_to_machine(config: MachineConfig) -> Machine:
    return Machine(
        id=config.id,
        name=config.name,
        machine_type=config.type,
        power_kw=config.power_kw,
        operation_cost_per_hour=config.operation_cost_per_hour,
        processing_speed=config.processing_speed,
    )


def config_to_factory(config: FactoryConfig) -> FactoryCatalog:
    """Build the in-memory factory catalog.

    Args:
        config: Validated factory section of a project file.

    Returns:
        FactoryCatalog with materials and drawer systems keyed by id.
    """
    carcass = config.carcass
    rules = carcass.edge_rules
    return FactoryCatalog(
        materials={m.id: config_to_material(m) for m in config.materials},
        carcass=CarcassSettings(
            board_id=carcass.board_id,
            back_board_id=carcass.back_board_id,
            edge_rules=EdgeRules(
                doors=rules.doors, visible=rules.visible, internal=rules.internal
            ),
            drawer_edge_id=carcass.drawer_edge_id,
            door_installation=carcass.door_installation,
            door_gap=carcass.door_gap,
            stretcher_height=carcass.stretcher_height,
            tower_shelf_count=carcass.tower_shelf_count,
            shelf_setback=carcass.shelf_setback,
            shelf_clearance=carcass.shelf_clearance,
            overlay_door_reduction=carcass.overlay_door_reduction,
        ),
        drawer_systems={s.id: config_to_drawer_system(s) for s in config.drawer_systems},
        machines=tuple(config_to_machine(m) for m in config.machines),
        cost=CostSettings(
            energy_price_per_kwh=config.cost.energy_price_per_kwh,
            profit_margin=config.cost.profit_margin,
            consumables=ConsumablesRates(
                screw_unit_price=config.cost.consumables.screw_unit_price,
                glue_flat_rate_per_module=config.cost.consumables.glue_flat_rate_per_module,
            ),
        ),
        tool_depths=ToolDepths(dict(config.tool_depths)),
    )


def config_to_override(config: OverrideConfig) -> PieceOverride:
    match config:
        case SetFinalWidthConfig():
            return SetFinalWidth(piece_id=config.piece_id, value=config.value)
        case SetFinalHeightConfig():
            return SetFinalHeight(piece_id=config.piece_id, value=config.value)
        case SetQuantityConfig():
            return SetQuantity(piece_id=config.piece_id, value=config.value)
        case SetEdgeConfig():
            return SetEdge(piece_id=config.piece_id, slot=config.slot, edge_id=config.edge_id)
    raise TypeError(f"Unsupported override config: {config!r}")


def config_to_module(config: ModuleConfig) -> ModuleSpec:
    return ModuleSpec(
        id=config.id,
        zone=config.zone,
        width=config.width,
        height=config.height,
        depth=config.depth,
        door_count=config.door_count,
        drawer_count=config.drawer_count,
        drawer_system_id=config.drawer_system_id,
        back_mounting=config.back_mounting,
        hinge_id=config.hinge_id,
        slide_id=config.slide_id,
        leg_id=config.leg_id,
        template_id=config.template_id,
        shelf_count=config.shelf_count,
        board_id=config.board_id,
        overrides=tuple(config_to_override(o) for o in config.overrides),
    )


def config_to_project(
    config: ProjectConfiguration,
) -> tuple[FactoryCatalog, list[ModuleSpec]]:
    """Convert a whole project file.

    Example:
        >>> config = load_config(Path("kitchen.json"))
        >>> factory, modules = config_to_project(config)
    """
    return config_to_factory(config.factory), [config_to_module(m) for m in config.modules]
