"""Tests for rule-based carcass piece generation."""

from __future__ import annotations

from dataclasses import replace

import pytest

from millwork.domain import FactoryCatalog, ModuleSpec
from millwork.domain.services import ModulePieceGenerator
from millwork.domain.value_objects import (
    BackMounting,
    DoorInstallation,
    EdgeSlot,
    PieceRole,
    Zone,
)


def generate(spec: ModuleSpec, factory: FactoryCatalog):
    return {p.id: p for p in ModulePieceGenerator().generate(spec, factory)}


class TestBaseModule:
    """Tests for BASE carcasses."""

    def test_piece_ids_are_stable(
        self, base_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        pieces = generate(base_module, factory)

        assert list(pieces) == [
            "b1-lateral-1",
            "b1-lateral-2",
            "b1-floor-1",
            "b1-stretcher-1",
            "b1-shelf-1",
            "b1-back-1",
            "b1-door-1",
            "b1-door-2",
        ]

    def test_laterals(self, base_module: ModuleSpec, factory: FactoryCatalog) -> None:
        lateral = generate(base_module, factory)["b1-lateral-1"]

        assert (lateral.final_width, lateral.final_height) == (560.0, 720.0)
        assert lateral.edge(EdgeSlot.A1).id == "pvc1"
        assert lateral.edge(EdgeSlot.A2).id == "pvc04"

    def test_floor_and_stretchers_use_internal_width(
        self, base_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        pieces = generate(base_module, factory)

        floor = pieces["b1-floor-1"]
        stretcher = pieces["b1-stretcher-1"]
        assert (floor.final_width, floor.final_height) == (564.0, 560.0)
        assert (stretcher.final_width, stretcher.final_height) == (564.0, 100.0)
        assert stretcher.quantity == 2
        assert "b1-ceiling-1" not in pieces

    def test_shelf_is_set_back(self, base_module: ModuleSpec, factory: FactoryCatalog) -> None:
        shelf = generate(base_module, factory)["b1-shelf-1"]

        assert (shelf.final_width, shelf.final_height) == (562.0, 540.0)
        assert shelf.quantity == 1

    def test_inset_back_uses_back_board(
        self, base_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        back = generate(base_module, factory)["b1-back-1"]

        assert (back.final_width, back.final_height) == (564.0, 702.0)
        assert back.material.id == "hdf3"

    def test_overlay_back_covers_carcass(
        self, base_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        spec = replace(base_module, back_mounting=BackMounting.OVERLAY)

        back = generate(spec, factory)["b1-back-1"]

        assert (back.final_width, back.final_height) == (600.0, 720.0)

    def test_overlay_doors(self, base_module: ModuleSpec, factory: FactoryCatalog) -> None:
        pieces = generate(base_module, factory)

        for door_id in ("b1-door-1", "b1-door-2"):
            door = pieces[door_id]
            assert (door.final_width, door.final_height) == (297.0, 715.0)
            assert door.quantity == 1
            assert all(band.id == "pvc1" for band in door.edges.values())

    @pytest.mark.parametrize("door_count,expected_width", [(1, 561.0), (2, 279.0)])
    def test_inset_doors(
        self,
        base_module: ModuleSpec,
        factory: FactoryCatalog,
        door_count: int,
        expected_width: float,
    ) -> None:
        inset = replace(
            factory, carcass=replace(factory.carcass, door_installation=DoorInstallation.INSET)
        )
        spec = replace(base_module, door_count=door_count)

        doors = [p for p in generate(spec, inset).values() if p.role is PieceRole.DOOR]

        assert len(doors) == door_count
        assert all(d.final_width == expected_width for d in doors)
        assert all(d.final_height == 714.0 for d in doors)


class TestWallAndTower:
    """Tests for WALL and TOWER carcasses."""

    def test_wall_has_floor_and_ceiling(
        self, wall_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        pieces = generate(wall_module, factory)

        assert pieces["w1-floor-1"].final_width == 764.0
        assert pieces["w1-ceiling-1"].final_width == 764.0
        assert "w1-stretcher-1" not in pieces
        assert pieces["w1-shelf-1"].quantity == 2

    def test_tower_defaults_to_three_shelves(self, factory: FactoryCatalog) -> None:
        spec = ModuleSpec(id="t1", zone=Zone.TOWER, width=600, height=2100, depth=580)

        pieces = generate(spec, factory)

        assert pieces["t1-shelf-1"].quantity == 3

    def test_explicit_zero_shelves(self, factory: FactoryCatalog) -> None:
        spec = ModuleSpec(
            id="t1", zone=Zone.TOWER, width=600, height=2100, depth=580, shelf_count=0
        )

        assert "t1-shelf-1" not in generate(spec, factory)


class TestDrawerModules:
    """Tests for modules with drawers."""

    def test_drawer_pieces_are_appended(
        self, drawer_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        pieces = generate(drawer_module, factory)

        bottom = pieces["d1-drawer_bottom-1"]
        assert bottom.quantity == 3
        assert (bottom.final_width, bottom.final_height) == (580.0, 540.0)

    def test_drawer_band_defaults_to_board_thickness(
        self, drawer_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        back = generate(drawer_module, factory)["d1-drawer_back-1"]

        assert back.edge(EdgeSlot.L1).thickness == 18

    def test_missing_drawer_system_raises(
        self, drawer_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        spec = replace(drawer_module, drawer_system_id=None)

        with pytest.raises(ValueError, match="drawer_system_id"):
            ModulePieceGenerator().generate(spec, factory)

    def test_generation_is_repeatable(
        self, drawer_module: ModuleSpec, factory: FactoryCatalog
    ) -> None:
        generator = ModulePieceGenerator()

        assert generator.generate(drawer_module, factory) == generator.generate(
            drawer_module, factory
        )
