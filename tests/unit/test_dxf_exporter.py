"""Tests for the per-piece DXF drilling exporter."""

from __future__ import annotations

import io
from dataclasses import replace
from pathlib import Path

import ezdxf
import pytest
from ezdxf.document import Drawing

from millwork.application import PlanProjectCommand, ProjectPlan
from millwork.domain import FactoryCatalog, ModuleSpec
from millwork.domain.exceptions import MachiningBoundsError
from millwork.domain.services.machining import hinge_operations, minifix_horizontal_operations
from millwork.domain.value_objects import (
    HingeSide,
    HingeSpec,
    MachiningOperation,
    MinifixHorizontalSpec,
    PieceGeometry,
    ToolDepths,
)
from millwork.infrastructure.exporters import (
    DxfExporter,
    ExporterRegistry,
    dxf_filename,
    layer_colors,
    serialize,
)
from millwork.infrastructure.exporters.dxf import FALLBACK_COLORS


def read_dxf(text: str) -> Drawing:
    return ezdxf.read(io.StringIO(text))


@pytest.fixture
def door_geometry() -> PieceGeometry:
    return PieceGeometry(width=295.0, height=713.0, thickness=18.0, piece_id="b1-door-1")


@pytest.fixture
def door_ops(door_geometry: PieceGeometry, tool_depths: ToolDepths) -> list[MachiningOperation]:
    return hinge_operations(door_geometry, HingeSpec(count=2), tool_depths)


@pytest.fixture
def door_doc(door_ops: list[MachiningOperation]) -> Drawing:
    return read_dxf(serialize("b1-door-1", "Door 1", 295.0, 713.0, door_ops))


class TestSerialize:
    """Tests for serialize()."""

    def test_readable_by_ezdxf(self, door_doc: Drawing) -> None:
        assert door_doc.dxfversion == ezdxf.const.DXF2010
        assert door_doc.header["$INSUNITS"] == 4

    def test_piece_identity_in_header(self, door_doc: Drawing) -> None:
        custom = door_doc.header.custom_vars

        assert custom.get("PIECE_ID") == "b1-door-1"
        assert custom.get("PIECE_NAME") == "Door 1"

    def test_layer_table(self, door_doc: Drawing) -> None:
        assert door_doc.layers.get("OUTLINE").color == 7
        assert door_doc.layers.get("DRILL_35MM").color == 3
        assert door_doc.layers.get("GUIDE_2MM").color == 4

    def test_outline_polyline(self, door_doc: Drawing) -> None:
        polylines = list(door_doc.modelspace().query("LWPOLYLINE"))

        assert len(polylines) == 1
        assert polylines[0].dxf.layer == "OUTLINE"
        assert polylines[0].closed
        assert list(polylines[0].get_points("xy")) == [
            (0.0, 0.0),
            (295.0, 0.0),
            (295.0, 713.0),
            (0.0, 713.0),
        ]

    def test_circles_grouped_by_layer(self, door_doc: Drawing) -> None:
        circles = list(door_doc.modelspace().query("CIRCLE"))

        assert [c.dxf.layer for c in circles] == ["DRILL_35MM"] * 2 + ["GUIDE_2MM"] * 4
        center = circles[0].dxf.center
        assert (center.x, center.y) == pytest.approx((22.5, 100.0))
        assert circles[0].dxf.radius == pytest.approx(17.5)

    def test_hinge_cups_get_cross_marks(self, door_doc: Drawing) -> None:
        lines = list(door_doc.modelspace().query("LINE"))

        assert len(lines) == 4
        assert {line.dxf.layer for line in lines} == {"DRILL_35MM"}
        assert lines[0].dxf.start.x == pytest.approx(21.5)
        assert lines[0].dxf.end.x == pytest.approx(23.5)

    def test_deterministic(self, door_ops: list[MachiningOperation]) -> None:
        first = serialize("b1-door-1", "Door 1", 295.0, 713.0, door_ops)
        second = serialize("b1-door-1", "Door 1", 295.0, 713.0, list(door_ops))

        assert first == second

    def test_leaves_ezdxf_options_untouched(self, door_ops: list[MachiningOperation]) -> None:
        before = ezdxf.options.write_fixed_meta_data_for_testing

        serialize("b1-door-1", "Door 1", 295.0, 713.0, door_ops)

        assert ezdxf.options.write_fixed_meta_data_for_testing == before

    def test_edge_operations_rejected(self, tool_depths: ToolDepths) -> None:
        floor = PieceGeometry(width=563.2, height=558.6, thickness=18.0)
        ops = minifix_horizontal_operations(
            floor, MinifixHorizontalSpec(side=HingeSide.LEFT, y_position=34.0), tool_depths
        )

        with pytest.raises(ValueError, match="edge-face"):
            serialize("b1-floor-1", "Floor", 563.2, 558.6, ops)

    def test_out_of_bounds_operation_rejected(self, door_ops: list[MachiningOperation]) -> None:
        stray = replace(door_ops[0], x=5.0, y=-40.0)

        with pytest.raises(MachiningBoundsError) as excinfo:
            serialize("p1", "Door", 400.0, 700.0, [stray])

        assert excinfo.value.piece_id == "p1"
        assert {v.axis for v in excinfo.value.violations} == {"x", "y"}


class TestLayerColors:
    def test_known_layers(self, door_ops: list[MachiningOperation]) -> None:
        assert layer_colors(door_ops) == {"OUTLINE": 7, "DRILL_35MM": 3, "GUIDE_2MM": 4}

    def test_unknown_tool_gets_fallback(self, door_ops: list[MachiningOperation]) -> None:
        odd = replace(door_ops[0], tool_id="DRILL_12MM")

        colors = layer_colors([odd, *door_ops])

        assert colors["DRILL_12MM"] == FALLBACK_COLORS[0]
        assert len(set(colors.values())) == len(colors)

    def test_more_tools_than_fallback_colors(self, door_ops: list[MachiningOperation]) -> None:
        ops = [replace(door_ops[0], tool_id=f"TOOL_{i}") for i in range(30)]

        colors = layer_colors(ops)

        assert len(colors) == 31
        assert len(set(colors.values())) == 31
        assert all(1 <= c <= 255 for c in colors.values())

    def test_color_indexes_exhausted(self, door_ops: list[MachiningOperation]) -> None:
        ops = [replace(door_ops[0], tool_id=f"TOOL_{i}") for i in range(300)]

        with pytest.raises(ValueError, match="Too many tool layers"):
            layer_colors(ops)


class TestDxfFilename:
    def test_slugged_name(self) -> None:
        assert (
            dxf_filename("Door 1", "k1-door-1", "White Melamine", 18)
            == "white_melamine18_door_1_k1-door-1.dxf"
        )

    def test_without_material(self) -> None:
        assert dxf_filename("Left lateral", "b1-lateral-1") == "left_lateral_b1-lateral-1.dxf"


class TestDxfExporter:
    """Tests for writing a project's machining as DXF files."""

    @pytest.fixture
    def plan(self, factory: FactoryCatalog, base_module: ModuleSpec) -> ProjectPlan:
        return PlanProjectCommand().execute(
            factory, [base_module], project_name="test", include_machining=True
        )

    def test_registered(self) -> None:
        assert ExporterRegistry.get("dxf") is DxfExporter

    def test_one_file_per_machined_piece(self, plan: ProjectPlan, tmp_path: Path) -> None:
        written = DxfExporter().export(plan, tmp_path / "dxf")

        assert len(written) == 5
        assert all(p.suffix == ".dxf" and p.exists() for p in written)
        assert (tmp_path / "dxf" / "white_melamine18_door_1_b1-door-1.dxf") in written

    def test_floor_drawing_omits_edge_bolts(self, plan: ProjectPlan) -> None:
        floor = next(m for m in plan.machining if m.piece.id == "b1-floor-1")

        doc = read_dxf(DxfExporter().render(floor))

        layers = {entity.dxf.layer for entity in doc.modelspace()}
        assert layers == {"OUTLINE", "POCKET_15MM"}

    def test_no_string_export(self, plan: ProjectPlan) -> None:
        with pytest.raises(NotImplementedError):
            DxfExporter().export_string(plan)
