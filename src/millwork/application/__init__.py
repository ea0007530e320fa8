"""Application layer - use cases and orchestration."""

from .commands import PlanProjectCommand
from .dtos import ModulePlan, ProjectPlan

__all__ = [
    "ModulePlan",
    "PlanProjectCommand",
    "ProjectPlan",
]
