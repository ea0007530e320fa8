"""Tests for converting project configuration into domain objects."""

from __future__ import annotations

from typing import Any

import pytest

from millwork.application.config import (
    ProjectConfiguration,
    config_to_factory,
    config_to_module,
    config_to_project,
)
from millwork.domain import FactoryCatalog, ModuleSpec
from millwork.domain.exceptions import UnknownCatalogItemError
from millwork.domain.value_objects import (
    BottomConstruction,
    DoorInstallation,
    EdgeSlot,
    MachineType,
    MaterialKind,
    MelamineDrawerSystem,
    MetalDrawerSystem,
    SetEdge,
    SetFinalWidth,
    Zone,
)


@pytest.fixture
def config(project_data: dict[str, Any]) -> ProjectConfiguration:
    return ProjectConfiguration.model_validate(project_data)


@pytest.fixture
def catalog(config: ProjectConfiguration) -> FactoryCatalog:
    return config_to_factory(config.factory)


class TestFactoryConversion:
    """Tests for config_to_factory()."""

    def test_materials_by_kind(self, catalog: FactoryCatalog) -> None:
        assert catalog.board("mel18").thickness == 18
        assert catalog.board("oak18").grain is True
        assert catalog.edge("pvc04").thickness == 0.4
        assert catalog.material("leg100").kind is MaterialKind.HARDWARE

    def test_install_profile_only_when_depths_given(self, catalog: FactoryCatalog) -> None:
        assert catalog.hardware("hinge110").install.tool_depths == {
            "DRILL_35MM": 13,
            "GUIDE_2MM": 10,
        }
        assert catalog.hardware("leg100").install is None

    def test_wrong_kind_lookup(self, catalog: FactoryCatalog) -> None:
        with pytest.raises(UnknownCatalogItemError) as exc_info:
            catalog.board("pvc1")
        assert exc_info.value.item_id == "pvc1"

    def test_drawer_systems(self, catalog: FactoryCatalog) -> None:
        tandem = catalog.drawer_system("tandem")
        box = catalog.drawer_system("box18")

        assert isinstance(tandem, MetalDrawerSystem)
        assert isinstance(box, MelamineDrawerSystem)
        assert box.slide_clearance == 26
        assert box.bottom_construction is BottomConstruction.GROOVED

    def test_machines_keep_type(self, catalog: FactoryCatalog) -> None:
        saw = catalog.machine(MachineType.CUTTING)

        assert saw is not None
        assert saw.id == "saw"
        assert saw.processing_speed == 5
        assert catalog.machine(MachineType.CNC).operation_cost_per_hour == 45

    def test_carcass_and_cost(self, catalog: FactoryCatalog) -> None:
        assert catalog.carcass.board_id == "mel18"
        assert catalog.carcass.door_installation is DoorInstallation.FULL_OVERLAY
        assert catalog.carcass.edge_rules.internal == "pvc04"
        assert catalog.cost.profit_margin == 40
        assert catalog.cost.consumables.screw_unit_price == 0.05

    def test_hardware_depths_override_factory(self, catalog: FactoryCatalog) -> None:
        depths = catalog.tool_depths_for("hinge110", "slide450", None)

        assert depths.depth_for("DRILL_35MM") == 13
        assert depths.depth_for("DRILL_5MM") == 12
        assert depths.depth_for("POCKET_15MM") == 12.5
        assert catalog.tool_depths.depth_for("DRILL_35MM") == 12.5


class TestModuleConversion:
    def test_plain_module(self, config: ProjectConfiguration) -> None:
        module = config_to_module(config.modules[0])

        assert isinstance(module, ModuleSpec)
        assert module.id == "b1"
        assert module.zone is Zone.BASE
        assert module.overrides == ()

    def test_overrides_keep_order(self, config: ProjectConfiguration) -> None:
        module = config_to_module(config.modules[1])

        assert module.overrides == (
            SetFinalWidth(piece_id="b2-shelf-1", value=540),
            SetEdge(piece_id="b2-shelf-1", slot=EdgeSlot.L2, edge_id="pvc1"),
        )
        assert module.has_overrides


def test_config_to_project(config: ProjectConfiguration) -> None:
    factory, modules = config_to_project(config)

    assert [m.id for m in modules] == ["b1", "b2", "d1", "d2", "w1", "t1"]
    assert factory.board_for(modules[-1]).id == "oak18"
    assert factory.board_for(modules[0]).id == "mel18"
