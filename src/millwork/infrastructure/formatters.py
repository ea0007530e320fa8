"""Plain-text report formatters for the CLI."""

from __future__ import annotations

from collections.abc import Sequence

from millwork.application.dtos import ModulePlan, ProjectPlan
from millwork.domain.entities import Piece
from millwork.domain.services import bill_of_materials
from millwork.domain.value_objects import CostBreakdown, CutListWarning, EdgeSlot


class CutListFormatter:
    """Formats a cut list as a table with finished and cut sizes."""

    def format(self, pieces: Sequence[Piece]) -> str:
        if not pieces:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 104,
            f"{'Id':<24} {'Piece':<28} {'Final WxH':<16} {'Cut WxH':<16} {'Qty':<4} {'Edges'}",
            "-" * 104,
        ]
        for piece in pieces:
            cut = piece.cut_dimensions
            lines.append(
                f"{piece.id:<24} {piece.name[:28]:<28} "
                f"{piece.final_width:>7.1f}x{piece.final_height:<8.1f} "
                f"{cut.cut_width:>7.1f}x{cut.cut_height:<8.1f} "
                f"{piece.quantity:<4} {self._edges(piece)}"
            )
        lines.append("-" * 104)
        lines.append(f"{'TOTAL PIECES':<70} {sum(p.quantity for p in pieces)}")
        return "\n".join(lines)

    @staticmethod
    def _edges(piece: Piece) -> str:
        labels = []
        for slot in EdgeSlot:
            band = piece.edge(slot)
            if band is not None:
                labels.append(f"{slot.value.upper()}:{band.thickness:g}")
        return " ".join(labels) or "-"

    def format_warnings(self, warnings: Sequence[CutListWarning]) -> str:
        if not warnings:
            return ""
        lines = ["WARNINGS", "-" * 40]
        lines.extend(f"  ! {w}" for w in warnings)
        return "\n".join(lines)


class MaterialReportFormatter:
    """Formats board area and edge banding totals."""

    def format(self, pieces: Sequence[Piece]) -> str:
        bom = bill_of_materials(pieces)
        lines = ["MATERIALS", "=" * 50]
        for material_id, area in sorted(bom.board_area_m2.items()):
            lines.append(f"  {material_id:<30} {area:>10.2f} m2")
        for material_id, meters in sorted(bom.edge_meters.items()):
            lines.append(f"  {material_id:<30} {meters:>10.1f} m")
        return "\n".join(lines)


class HardwareReportFormatter:
    """Formats per-module hardware assignments."""

    def format(self, modules: Sequence[ModulePlan]) -> str:
        lines = ["HARDWARE", "=" * 50]
        for plan in modules:
            lines.append(f"{plan.module.id} ({plan.module.zone.value})")
            if not plan.hardware_summary:
                lines.append("  (none)")
            lines.extend(f"  - {line}" for line in plan.hardware_summary)
        return "\n".join(lines)


class CostReportFormatter:
    """Formats a cost breakdown and suggested price."""

    def format(self, cost: CostBreakdown, project_name: str = "") -> str:
        title = f"COST ESTIMATE - {project_name}" if project_name else "COST ESTIMATE"
        lines = [
            title,
            "=" * 50,
            f"{'Materials':<30} {cost.materials:>12.2f}",
            f"{'Hardware':<30} {cost.hardware:>12.2f}",
            f"{'Consumables':<30} {cost.consumables:>12.2f}",
            f"{'Operations':<30} {cost.operations:>12.2f}",
            "-" * 50,
            f"{'Total cost':<30} {cost.totals.total_cost:>12.2f}",
            f"{'Margin (% of price)':<30} {cost.totals.margin:>12.1f}",
            f"{'Suggested price':<30} {cost.totals.suggested_price:>12.2f}",
            "",
            "Stats:",
            f"  hinges={cost.stats.hinges} slides={cost.stats.slides} "
            f"screws={cost.stats.screws}",
            f"  edge banding={cost.stats.edge_meters:.1f} m "
            f"cutting={cost.stats.cutting_meters:.1f} m",
        ]
        if cost.hardware_lines:
            lines.append("")
            lines.append("Hardware:")
            for line in cost.hardware_lines:
                lines.append(f"  {line.name:<28} x{line.count:<5} {line.cost:>10.2f}")
        return "\n".join(lines)


def format_project_summary(plan: ProjectPlan) -> str:
    warnings = plan.warnings
    return (
        f"{plan.project_name}: {len(plan.modules)} modules, "
        f"{sum(p.quantity for p in plan.pieces)} pieces, "
        f"{len(warnings)} warning(s)"
    )
