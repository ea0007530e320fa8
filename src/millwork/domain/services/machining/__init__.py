"""CNC machining coordinate generation.

Operation families (hinges, Minifix, System32, slides) share one bounds
validator. The planner applies them to a module's pieces by role.
"""

from .constants import SECONDS_PER_OPERATION
from .operations import (
    MachiningCoordinateGenerator,
    hinge_cup_positions,
    hinge_operations,
    minifix_horizontal_operations,
    minifix_vertical_operations,
    slide_operations,
    system32_operations,
)
from .planner import MachiningPlanner, PieceMachining
from .validation import find_violations, validate_operations

__all__ = [
    "SECONDS_PER_OPERATION",
    "MachiningCoordinateGenerator",
    "MachiningPlanner",
    "PieceMachining",
    "find_violations",
    "hinge_cup_positions",
    "hinge_operations",
    "minifix_horizontal_operations",
    "minifix_vertical_operations",
    "slide_operations",
    "system32_operations",
    "validate_operations",
]
