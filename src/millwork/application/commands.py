"""Application commands (use cases) for quoting and planning projects."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from millwork.domain.entities import FactoryCatalog, ModuleSpec
from millwork.domain.services import (
    CostAggregator,
    HardwareRuleEngine,
    MachiningPlanner,
    ModulePieceGenerator,
    build_piece_list,
)

from .dtos import ModulePlan, ProjectPlan

logger = logging.getLogger(__name__)


class PlanProjectCommand:
    """Generate pieces, hardware, cost and optionally machining for a project."""

    def __init__(
        self,
        piece_generator: ModulePieceGenerator | None = None,
        hardware_rules: HardwareRuleEngine | None = None,
        cost_aggregator: CostAggregator | None = None,
        machining_planner: MachiningPlanner | None = None,
    ) -> None:
        self.piece_generator = piece_generator or ModulePieceGenerator()
        self.hardware_rules = hardware_rules or HardwareRuleEngine()
        self.cost_aggregator = cost_aggregator or CostAggregator(self.hardware_rules)
        self.machining_planner = machining_planner or MachiningPlanner()

    def execute(
        self,
        factory: FactoryCatalog,
        modules: Sequence[ModuleSpec],
        project_name: str = "",
        include_machining: bool = False,
    ) -> ProjectPlan:
        """Plan every module and cost the whole project.

        Args:
            factory: Factory catalog.
            modules: Modules to plan.
            project_name: Name carried into the result.
            include_machining: Also compute CNC operations per piece.

        Returns:
            ProjectPlan with per-module results and the cost breakdown.

        Raises:
            MachiningBoundsError: A machining operation falls outside its piece.
            MissingToolDepthError: A drilling tool has no configured depth.
            UnknownCatalogItemError: A module references a missing catalog id.
        """
        plans: list[ModulePlan] = []
        for module in modules:
            piece_list = build_piece_list(module, factory, self.piece_generator)
            hardware = self.hardware_rules.assign(module, piece_list.pieces)
            plan = ModulePlan(
                module=module,
                piece_list=piece_list,
                hardware=hardware,
                hardware_summary=self.hardware_rules.summarize(hardware),
            )
            if include_machining:
                depths = factory.tool_depths_for(module.hinge_id, module.slide_id)
                plan.machining = self.machining_planner.plan(piece_list, hardware, depths)
            plans.append(plan)

        cost = self.cost_aggregator.aggregate(
            [piece for plan in plans for piece in plan.pieces],
            list(modules),
            factory.materials,
            factory.machines,
            factory.cost,
        )
        logger.info(
            "Planned %d modules (%d pieces), total cost %.2f",
            len(plans),
            sum(len(p.pieces) for p in plans),
            cost.totals.total_cost,
        )
        return ProjectPlan(
            project_name=project_name, factory=factory, modules=plans, cost=cost
        )
