"""Tests for drawer box piece generation."""

from __future__ import annotations

import pytest

from millwork.domain.services import DrawerConfig, DrawerPieceGenerator
from millwork.domain.value_objects import (
    BottomConstruction,
    EdgeSlot,
    Material,
    MelamineDrawerSystem,
    MetalDrawerSystem,
    PieceRole,
)


@pytest.fixture
def metal_system() -> MetalDrawerSystem:
    return MetalDrawerSystem(
        id="tandem", name="Metal box", slide_clearance=10, backend_clearance=20
    )


@pytest.fixture
def melamine_system() -> MelamineDrawerSystem:
    return MelamineDrawerSystem(
        id="box18", name="Melamine box", slide_clearance=13, backend_clearance=20
    )


def by_id(pieces):
    return {p.id: p for p in pieces}


class TestMetalDrawers:
    """Tests for metal (Tandembox style) drawer systems."""

    def test_single_drawer_bottom_and_back(
        self, board: Material, metal_system: MetalDrawerSystem
    ) -> None:
        config = DrawerConfig(
            module_id="d1",
            module_width=600,
            module_depth=560,
            module_height=150,
            drawer_count=1,
            system=metal_system,
            board=board,
        )

        pieces = by_id(DrawerPieceGenerator().generate(config))

        bottom = pieces["d1-drawer_bottom-1"]
        back = pieces["d1-drawer_back-1"]
        assert (bottom.final_width, bottom.final_height) == (580.0, 540.0)
        assert (back.final_width, back.final_height) == (580.0, 90.0)
        for slot in (EdgeSlot.L1, EdgeSlot.A1, EdgeSlot.A2):
            assert back.edge(slot).thickness == 18
        assert back.edge(EdgeSlot.L2) is None

    def test_two_piece_types_with_drawer_quantity(
        self, board: Material, metal_system: MetalDrawerSystem
    ) -> None:
        config = DrawerConfig("d1", 600, 560, 720, 3, metal_system, board)

        pieces = DrawerPieceGenerator().generate(config)

        assert len(pieces) == 2
        assert all(p.quantity == 3 for p in pieces)

    def test_configured_band_is_used(
        self, board: Material, thin_edge: Material, metal_system: MetalDrawerSystem
    ) -> None:
        config = DrawerConfig(
            "d1", 600, 560, 720, 3, metal_system, board, edge_band=thin_edge
        )

        back = by_id(DrawerPieceGenerator().generate(config))["d1-drawer_back-1"]

        assert back.edge(EdgeSlot.L1) is thin_edge


class TestMelamineDrawers:
    """Tests for six-piece melamine drawer boxes."""

    def test_six_piece_types(
        self, board: Material, melamine_system: MelamineDrawerSystem
    ) -> None:
        config = DrawerConfig("d2", 450, 560, 720, 2, melamine_system, board)

        pieces = DrawerPieceGenerator().generate(config)

        assert len(pieces) == 6
        assert {p.role for p in pieces} == {
            PieceRole.DRAWER_SIDE,
            PieceRole.DRAWER_FRONT,
            PieceRole.DRAWER_BACK,
            PieceRole.DRAWER_BOTTOM,
            PieceRole.DRAWER_FACE,
        }
        assert all(p.quantity == 2 for p in pieces)

    def test_box_dimensions(
        self, board: Material, melamine_system: MelamineDrawerSystem
    ) -> None:
        config = DrawerConfig("d2", 450, 560, 720, 2, melamine_system, board)

        pieces = by_id(DrawerPieceGenerator().generate(config))

        # drawer 424 wide, 540 deep, 360 high; internal height 342
        assert pieces["d2-drawer_side-1"].final_width == 540.0
        assert pieces["d2-drawer_side-1"].final_height == 342.0
        assert pieces["d2-drawer_front-1"].final_width == 388.0
        assert pieces["d2-drawer_back-1"].final_height == 239.4
        assert pieces["d2-drawer_face-1"].final_width == 450.0
        assert pieces["d2-drawer_face-1"].final_height == 360.0

    def test_sides_are_mirrored(
        self, board: Material, melamine_system: MelamineDrawerSystem
    ) -> None:
        config = DrawerConfig("d2", 450, 560, 720, 2, melamine_system, board)

        pieces = by_id(DrawerPieceGenerator().generate(config))
        left, right = pieces["d2-drawer_side-1"], pieces["d2-drawer_side-2"]

        assert left.edge(EdgeSlot.A2) is not None and left.edge(EdgeSlot.A1) is None
        assert right.edge(EdgeSlot.A1) is not None and right.edge(EdgeSlot.A2) is None

    @pytest.mark.parametrize(
        "construction,expected",
        [
            (BottomConstruction.GROOVED, (384.0, 500.0)),
            (BottomConstruction.NAILED, (388.0, 504.0)),
        ],
    )
    def test_bottom_construction(
        self,
        board: Material,
        construction: BottomConstruction,
        expected: tuple[float, float],
    ) -> None:
        system = MelamineDrawerSystem(
            id="box", name="Box", slide_clearance=13, backend_clearance=20,
            bottom_construction=construction,
        )
        config = DrawerConfig("d2", 450, 560, 720, 2, system, board)

        bottom = by_id(DrawerPieceGenerator().generate(config))["d2-drawer_bottom-1"]

        assert (bottom.final_width, bottom.final_height) == expected
        assert all(band is None for band in bottom.edges.values())


class TestDrawerConfig:
    def test_requires_at_least_one_drawer(
        self, board: Material, metal_system: MetalDrawerSystem
    ) -> None:
        with pytest.raises(ValueError):
            DrawerConfig("d1", 600, 560, 720, 0, metal_system, board)
