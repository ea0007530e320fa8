"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from millwork.domain.entities import FactoryCatalog, ModuleSpec, Piece
from millwork.domain.services import PieceList, PieceMachining
from millwork.domain.value_objects import (
    CostBreakdown,
    CutListWarning,
    HardwareAssignment,
)


@dataclass
class ModulePlan:
    """Everything computed for one module."""

    module: ModuleSpec
    piece_list: PieceList
    hardware: HardwareAssignment
    hardware_summary: list[str] = field(default_factory=list)
    machining: list[PieceMachining] = field(default_factory=list)

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return self.piece_list.pieces


@dataclass
class ProjectPlan:
    """Output DTO of PlanProjectCommand.

    Attributes:
        project_name: Name from the project file.
        factory: Catalog the plan was computed against.
        modules: Per-module results, in input order.
        cost: Cost breakdown for the whole project.
    """

    project_name: str
    factory: FactoryCatalog
    modules: list[ModulePlan]
    cost: CostBreakdown

    @property
    def pieces(self) -> list[Piece]:
        return [piece for plan in self.modules for piece in plan.pieces]

    @property
    def warnings(self) -> list[CutListWarning]:
        return [w for plan in self.modules for w in plan.piece_list.warnings]

    @property
    def machining(self) -> list[PieceMachining]:
        return [m for plan in self.modules for m in plan.machining]
