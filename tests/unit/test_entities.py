"""Tests for domain entities."""

from __future__ import annotations

from dataclasses import replace

import pytest

from millwork.domain import (
    FactoryCatalog,
    ModuleSpec,
    Piece,
    UnknownCatalogItemError,
    piece_id,
)
from millwork.domain.value_objects import (
    EdgeSlot,
    Material,
    MachineType,
    PieceRole,
    Zone,
)


class TestPiece:
    """Tests for the Piece entity."""

    def test_rejects_zero_quantity(self, board: Material) -> None:
        with pytest.raises(ValueError, match="quantity"):
            Piece("p", "m", "Piece", PieceRole.SHELF, 100, 100, board, quantity=0)

    def test_rejects_negative_dimensions(self, board: Material) -> None:
        with pytest.raises(ValueError, match="negative"):
            Piece("p", "m", "Piece", PieceRole.SHELF, -1, 100, board)

    def test_rejects_board_in_edge_slot(self, board: Material) -> None:
        with pytest.raises(ValueError, match="non-edge"):
            Piece("p", "m", "Piece", PieceRole.SHELF, 100, 100, board, edge_l1=board)

    def test_with_edge_replaces_one_slot(
        self, board: Material, thick_edge: Material
    ) -> None:
        piece = Piece("p", "m", "Piece", PieceRole.SHELF, 100, 100, board)

        banded = piece.with_edge(EdgeSlot.A2, thick_edge)

        assert banded.edge(EdgeSlot.A2) is thick_edge
        assert piece.edge(EdgeSlot.A2) is None
        assert banded.edges[EdgeSlot.L1] is None

    def test_piece_id_format(self) -> None:
        assert piece_id("k1", PieceRole.DOOR, 2) == "k1-door-2"
        assert piece_id("k1", PieceRole.LATERAL) == "k1-lateral-1"


class TestModuleSpec:
    """Tests for the ModuleSpec entity."""

    def test_rejects_non_positive_dimensions(self) -> None:
        with pytest.raises(ValueError):
            ModuleSpec(id="m", zone=Zone.BASE, width=0, height=720, depth=560)

    def test_aperture_signature_tracks_hardware(self, base_module: ModuleSpec) -> None:
        other = ModuleSpec(
            id="b9",
            zone=Zone.BASE,
            width=900,
            height=720,
            depth=560,
            door_count=2,
            shelf_count=1,
            hinge_id="hinge110",
        )

        assert other.aperture_signature == base_module.aperture_signature

    def test_aperture_signature_tracks_zone_and_shelves(self, base_module: ModuleSpec) -> None:
        assert replace(base_module, zone=Zone.WALL).aperture_signature != (
            base_module.aperture_signature
        )
        assert replace(base_module, shelf_count=0).aperture_signature != (
            base_module.aperture_signature
        )


class TestFactoryCatalog:
    """Tests for catalog lookups."""

    def test_unknown_material_raises(self, factory: FactoryCatalog) -> None:
        with pytest.raises(UnknownCatalogItemError) as exc_info:
            factory.material("walnut")
        assert exc_info.value.item_id == "walnut"

    def test_wrong_kind_raises(self, factory: FactoryCatalog) -> None:
        with pytest.raises(UnknownCatalogItemError):
            factory.edge("mel18")

    def test_none_edge_is_unbanded(self, factory: FactoryCatalog) -> None:
        assert factory.edge(None) is None

    def test_unknown_drawer_system_raises(self, factory: FactoryCatalog) -> None:
        with pytest.raises(UnknownCatalogItemError):
            factory.drawer_system("missing")

    def test_machine_by_type(self, factory: FactoryCatalog) -> None:
        assert factory.machine(MachineType.CUTTING).id == "saw"

    def test_tool_depths_merge_install_profile(self, factory: FactoryCatalog) -> None:
        depths = factory.tool_depths_for("hinge110", None)

        assert depths.depth_for("DRILL_35MM") == 13
        assert depths.depth_for("GUIDE_2MM") == 10

    def test_board_for_uses_module_override(
        self, factory: FactoryCatalog, base_module: ModuleSpec
    ) -> None:
        assert factory.board_for(base_module).id == "mel18"
