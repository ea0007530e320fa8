"""Pytest configuration and shared fixtures for millwork tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from millwork.domain import CarcassSettings, EdgeRules, FactoryCatalog, ModuleSpec
from millwork.domain.value_objects import (
    ConsumablesRates,
    CostSettings,
    InstallProfile,
    Machine,
    MachineType,
    Material,
    MaterialKind,
    MelamineDrawerSystem,
    MetalDrawerSystem,
    ToolDepths,
    Zone,
)

EXAMPLE_PROJECT = Path(__file__).parent.parent / "examples" / "kitchen.json"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Catalog fixtures
# =============================================================================


@pytest.fixture
def board() -> Material:
    return Material(
        id="mel18",
        name="White Melamine",
        kind=MaterialKind.BOARD,
        thickness=18,
        unit_cost=32.5,
    )


@pytest.fixture
def back_board() -> Material:
    return Material(
        id="hdf3", name="White HDF", kind=MaterialKind.BOARD, thickness=3, unit_cost=9.8
    )


@pytest.fixture
def thick_edge() -> Material:
    return Material(
        id="pvc1", name="PVC 1mm", kind=MaterialKind.EDGE, thickness=1, unit_cost=0.85
    )


@pytest.fixture
def thin_edge() -> Material:
    return Material(
        id="pvc04", name="PVC 0.4mm", kind=MaterialKind.EDGE, thickness=0.4, unit_cost=0.35
    )


@pytest.fixture
def hinge() -> Material:
    return Material(
        id="hinge110",
        name="Clip hinge 110",
        kind=MaterialKind.HARDWARE,
        unit_cost=3.2,
        install=InstallProfile(tool_depths={"DRILL_35MM": 13}),
    )


@pytest.fixture
def slide() -> Material:
    return Material(
        id="slide450", name="Slide pair", kind=MaterialKind.HARDWARE, unit_cost=18.5
    )


@pytest.fixture
def leg() -> Material:
    return Material(id="leg100", name="Leg", kind=MaterialKind.HARDWARE, unit_cost=0.9)


@pytest.fixture
def tool_depths() -> ToolDepths:
    return ToolDepths(
        depths={
            "DRILL_35MM": 12.5,
            "GUIDE_2MM": 10,
            "DRILL_5MM": 11,
            "DRILL_8MM": 28,
            "POCKET_15MM": 12.5,
        }
    )


@pytest.fixture
def machines() -> tuple[Machine, ...]:
    return (
        Machine("saw", "Panel saw", MachineType.CUTTING, 5.5, 15.0, 5.0),
        Machine("bander", "Edge bander", MachineType.EDGE_BANDING, 7.5, 25.0, 8.0),
        Machine("cnc", "CNC router", MachineType.CNC, 12.0, 45.0, 15.0),
    )


@pytest.fixture
def factory(
    board: Material,
    back_board: Material,
    thick_edge: Material,
    thin_edge: Material,
    hinge: Material,
    slide: Material,
    leg: Material,
    tool_depths: ToolDepths,
    machines: tuple[Machine, ...],
) -> FactoryCatalog:
    """Factory with one board, two edge bands and both drawer systems."""
    materials = {
        m.id: m for m in (board, back_board, thick_edge, thin_edge, hinge, slide, leg)
    }
    return FactoryCatalog(
        materials=materials,
        carcass=CarcassSettings(
            board_id="mel18",
            back_board_id="hdf3",
            edge_rules=EdgeRules(doors="pvc1", visible="pvc1", internal="pvc04"),
        ),
        drawer_systems={
            "tandem": MetalDrawerSystem(
                id="tandem", name="Metal box", slide_clearance=10, backend_clearance=20
            ),
            "box18": MelamineDrawerSystem(
                id="box18", name="Melamine box", slide_clearance=26, backend_clearance=20
            ),
        },
        machines=machines,
        cost=CostSettings(
            energy_price_per_kwh=0.15,
            profit_margin=40,
            consumables=ConsumablesRates(
                screw_unit_price=0.05,
                glue_flat_rate_per_module=2.5,
            ),
        ),
        tool_depths=tool_depths,
    )


# =============================================================================
# Module fixtures
# =============================================================================


@pytest.fixture
def base_module() -> ModuleSpec:
    """600 wide base module with two doors and one shelf."""
    return ModuleSpec(
        id="b1",
        zone=Zone.BASE,
        width=600,
        height=720,
        depth=560,
        door_count=2,
        shelf_count=1,
        hinge_id="hinge110",
        leg_id="leg100",
        template_id="base-2door",
    )


@pytest.fixture
def drawer_module() -> ModuleSpec:
    return ModuleSpec(
        id="d1",
        zone=Zone.BASE,
        width=600,
        height=720,
        depth=560,
        drawer_count=3,
        drawer_system_id="tandem",
        slide_id="slide450",
    )


@pytest.fixture
def wall_module() -> ModuleSpec:
    return ModuleSpec(
        id="w1",
        zone=Zone.WALL,
        width=800,
        height=700,
        depth=320,
        door_count=2,
        shelf_count=2,
        hinge_id="hinge110",
    )


# =============================================================================
# Project file fixtures
# =============================================================================


@pytest.fixture
def project_data() -> dict[str, Any]:
    """The example kitchen project as a dictionary."""
    return json.loads(EXAMPLE_PROJECT.read_text(encoding="utf-8"))


@pytest.fixture
def project_file(tmp_path: Path, project_data: dict[str, Any]) -> Path:
    path = tmp_path / "kitchen.json"
    path.write_text(json.dumps(project_data), encoding="utf-8")
    return path
