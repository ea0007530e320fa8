"""Pydantic schemas for millwork project files.

A project file holds the factory catalog (materials, drawer systems,
machines, rates, tool depths, carcass settings) and the list of modules.
Closed variants use discriminated unions so an invalid combination, such
as a tool depth on a board, fails validation instead of at runtime.
"""

from typing import Annotated, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from millwork.domain.value_objects import (
    BackMounting,
    BottomConstruction,
    DoorInstallation,
    EdgeSlot,
    MachineType,
    Zone,
)

# Version 1.0: Initial project format
# Version 1.1: Added module overrides and template ids
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

ToolDepthMap = dict[str, Annotated[float, Field(gt=0)]]


# =============================================================================
# Catalog materials
# =============================================================================


class _MaterialBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    unit_cost: float = Field(default=0.0, ge=0)
    category: str = ""


class BoardMaterialConfig(_MaterialBase):
    """Sheet stock priced per m2.

    Attributes:
        thickness: Board thickness in mm.
        grain: Whether cut optimizers must keep the grain direction.
    """

    kind: Literal["board"] = "board"
    thickness: float = Field(..., gt=0, le=100)
    grain: bool = False


class EdgeMaterialConfig(_MaterialBase):
    """Edge banding priced per linear meter."""

    kind: Literal["edge"] = "edge"
    thickness: float = Field(..., gt=0, le=10)


class HardwareMaterialConfig(_MaterialBase):
    """Hinges, slides and legs priced per unit.

    Attributes:
        tool_depths: Drilling depth per tool id required by this hardware.
    """

    kind: Literal["hardware"] = "hardware"
    tool_depths: ToolDepthMap = Field(default_factory=dict)


MaterialConfig = Annotated[
    Union[BoardMaterialConfig, EdgeMaterialConfig, HardwareMaterialConfig],
    Field(discriminator="kind"),
]


# =============================================================================
# Drawer systems
# =============================================================================


class MetalDrawerSystemConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["metal"]
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    slide_clearance: float = Field(..., ge=0, le=100)
    backend_clearance: float = Field(..., ge=0, le=200)


class MelamineDrawerSystemConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["melamine"]
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    slide_clearance: float = Field(..., ge=0, le=100)
    backend_clearance: float = Field(..., ge=0, le=200)
    bottom_construction: BottomConstruction = BottomConstruction.GROOVED


DrawerSystemConfig = Annotated[
    Union[MetalDrawerSystemConfig, MelamineDrawerSystemConfig],
    Field(discriminator="kind"),
]


# =============================================================================
# Machines and rates
# =============================================================================


class MachineConfig(BaseModel):
    """Workshop machine.

    Attributes:
        processing_speed: Feed in meters per minute. Zero is allowed and
            yields a zero cost estimate.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: MachineType
    power_kw: float = Field(..., ge=0)
    operation_cost_per_hour: float = Field(..., ge=0)
    processing_speed: float = Field(..., ge=0)


class ConsumablesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    screw_unit_price: float = Field(default=0.0, ge=0)
    glue_flat_rate_per_module: float = Field(default=0.0, ge=0)


class CostConfig(BaseModel):
    """Pricing settings.

    Attributes:
        energy_price_per_kwh: Electricity price.
        profit_margin: Margin on sale price in percent, below 100.
    """

    model_config = ConfigDict(extra="forbid")

    energy_price_per_kwh: float = Field(default=0.0, ge=0)
    profit_margin: float = Field(default=0.0, ge=0, lt=100)
    consumables: ConsumablesConfig = Field(default_factory=ConsumablesConfig)


# =============================================================================
# Carcass construction
# =============================================================================


class EdgeRulesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    doors: str | None = None
    visible: str | None = None
    internal: str | None = None


class CarcassConfig(BaseModel):
    """Construction choices shared by every module."""

    model_config = ConfigDict(extra="forbid")

    board_id: str = Field(..., min_length=1)
    back_board_id: str | None = None
    edge_rules: EdgeRulesConfig = Field(default_factory=EdgeRulesConfig)
    drawer_edge_id: str | None = None
    door_installation: DoorInstallation = DoorInstallation.FULL_OVERLAY
    door_gap: float = Field(default=3.0, ge=0, le=20)
    stretcher_height: float = Field(default=100.0, gt=0)
    tower_shelf_count: int = Field(default=3, ge=0, le=20)
    shelf_setback: float = Field(default=20.0, ge=0)
    shelf_clearance: float = Field(default=2.0, ge=0)
    overlay_door_reduction: float = Field(default=5.0, ge=0)


class FactoryConfig(BaseModel):
    """Factory catalog and rates.

    Attributes:
        materials: Boards, edge bands and hardware.
        drawer_systems: Drawer box systems.
        machines: Workshop machines used by the operations estimate.
        cost: Energy price, margin and consumables.
        tool_depths: Factory-wide drilling depth per tool id.
        carcass: Default construction choices.
    """

    model_config = ConfigDict(extra="forbid")

    materials: list[MaterialConfig] = Field(..., min_length=1)
    drawer_systems: list[DrawerSystemConfig] = Field(default_factory=list)
    machines: list[MachineConfig] = Field(default_factory=list)
    cost: CostConfig = Field(default_factory=CostConfig)
    tool_depths: ToolDepthMap = Field(default_factory=dict)
    carcass: CarcassConfig

    @model_validator(mode="after")
    def validate_references(self) -> "FactoryConfig":
        """Check ids are unique and carcass references point at the right kind."""
        kinds: dict[str, str] = {}
        for material in self.materials:
            if material.id in kinds:
                raise ValueError(f"Duplicate material id '{material.id}'")
            kinds[material.id] = material.kind

        system_ids = [s.id for s in self.drawer_systems]
        if len(system_ids) != len(set(system_ids)):
            raise ValueError("Drawer system ids must be unique")

        carcass = self.carcass
        expected = [
            ("carcass.board_id", carcass.board_id, "board"),
            ("carcass.back_board_id", carcass.back_board_id, "board"),
            ("carcass.drawer_edge_id", carcass.drawer_edge_id, "edge"),
            ("carcass.edge_rules.doors", carcass.edge_rules.doors, "edge"),
            ("carcass.edge_rules.visible", carcass.edge_rules.visible, "edge"),
            ("carcass.edge_rules.internal", carcass.edge_rules.internal, "edge"),
        ]
        for path, ref, kind in expected:
            if ref is not None and kinds.get(ref) != kind:
                raise ValueError(f"{path} '{ref}' is not a known {kind} material")
        return self


# =============================================================================
# Modules and overrides
# =============================================================================


class SetFinalWidthConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_final_width"]
    piece_id: str
    value: float = Field(..., gt=0)


class SetFinalHeightConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_final_height"]
    piece_id: str
    value: float = Field(..., gt=0)


class SetQuantityConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_quantity"]
    piece_id: str
    value: int = Field(..., ge=1)


class SetEdgeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_edge"]
    piece_id: str
    slot: EdgeSlot
    edge_id: str | None = None


OverrideConfig = Annotated[
    Union[SetFinalWidthConfig, SetFinalHeightConfig, SetQuantityConfig, SetEdgeConfig],
    Field(discriminator="op"),
]


class ModuleConfig(BaseModel):
    """One cabinet module.

    Attributes:
        id: Unique module id.
        zone: base, wall or tower.
        width: Outer width in mm.
        height: Carcass height in mm.
        depth: Carcass depth in mm.
        overrides: Manual piece edits replayed after generation.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, pattern=r"^[A-Za-z0-9_.-]+$")
    zone: Zone
    width: float = Field(..., gt=0, le=3000)
    height: float = Field(..., gt=0, le=3000)
    depth: float = Field(..., gt=0, le=1200)
    door_count: int = Field(default=0, ge=0, le=6)
    drawer_count: int = Field(default=0, ge=0, le=10)
    drawer_system_id: str | None = None
    back_mounting: BackMounting = BackMounting.INSET
    hinge_id: str | None = None
    slide_id: str | None = None
    leg_id: str | None = None
    template_id: str | None = None
    shelf_count: int | None = Field(default=None, ge=0, le=20)
    board_id: str | None = None
    overrides: list[OverrideConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_drawers(self) -> "ModuleConfig":
        if self.drawer_count > 0 and self.drawer_system_id is None:
            raise ValueError(f"Module '{self.id}' has drawers but no drawer_system_id")
        return self


class ProjectConfiguration(BaseModel):
    """Root model of a project file.

    Example:
        >>> config = ProjectConfiguration.model_validate(
        ...     {"schema_version": "1.0", "project_name": "Kitchen", ...}
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project_name: str = Field(..., min_length=1)
    factory: FactoryConfig
    modules: list[ModuleConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept listed versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major = v.split(".")[0]
        if any(s.split(".")[0] == major for s in SUPPORTED_VERSIONS):
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    @model_validator(mode="after")
    def validate_module_references(self) -> "ProjectConfiguration":
        """Module ids are unique and every catalog id they use exists."""
        ids = [m.id for m in self.modules]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate module ids: {', '.join(duplicates)}")

        kinds = {m.id: m.kind for m in self.factory.materials}
        systems = {s.id for s in self.factory.drawer_systems}
        for module in self.modules:
            for field_name, kind in (
                ("hinge_id", "hardware"),
                ("slide_id", "hardware"),
                ("leg_id", "hardware"),
                ("board_id", "board"),
            ):
                ref = getattr(module, field_name)
                if ref is not None and kinds.get(ref) != kind:
                    raise ValueError(
                        f"Module '{module.id}' {field_name} '{ref}' is not a known {kind} material"
                    )
            if module.drawer_system_id is not None and module.drawer_system_id not in systems:
                raise ValueError(
                    f"Module '{module.id}' drawer_system_id '{module.drawer_system_id}' "
                    "is not a known drawer system"
                )
        return self
