"""Hardware quantity rules: legs, hinges and drawer slides.

The hinge table here is the one used for the bill of materials. The cost
estimate keeps its own bracket table (``cost_engine_hinges_per_door``),
which disagrees with this one between 500 and 1600 mm door heights. The
two are intentionally not merged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..value_objects import (
    HardwareAssignment,
    HingeAssignment,
    LegAssignment,
    PieceRole,
    SlideAssignment,
    Zone,
)

if TYPE_CHECKING:
    from ..entities import ModuleSpec, Piece

__all__ = ["HardwareRuleEngine", "door_height_for"]

WIDE_MODULE_THRESHOLD = 800.0
LOW_DOOR_MAX_HEIGHT = 500.0
STANDARD_DOOR_MAX_HEIGHT = 1200.0


class HardwareRuleEngine:
    """Assigns legs, hinges and slides to a module."""

    def legs(self, module_width: float, zone: Zone) -> LegAssignment | None:
        """Legs for a module, or None for zones that hang or stand without legs."""
        if zone is not Zone.BASE:
            return None
        if module_width > WIDE_MODULE_THRESHOLD:
            return LegAssignment(
                quantity=6,
                reason="Wide module (>800mm) needs 6 legs (3 pairs) for stability",
            )
        return LegAssignment(
            quantity=4, reason="Standard module (<=800mm) needs 4 legs (2 pairs)"
        )

    def hinges(self, door_height: float, door_count: int) -> HingeAssignment:
        if door_height <= LOW_DOOR_MAX_HEIGHT:
            per_door, reason = 2, "Low door (<=500mm)"
        elif door_height <= STANDARD_DOOR_MAX_HEIGHT:
            per_door, reason = 3, "Standard door (501-1200mm)"
        else:
            per_door, reason = 4, "Tall door (>1200mm)"
        return HingeAssignment(per_door=per_door, total=per_door * door_count, reason=reason)

    def assign(self, module: ModuleSpec, pieces: Iterable[Piece]) -> HardwareAssignment:
        """Build the hardware assignment for a module and its generated pieces.

        Door height is taken from the module's first DOOR piece and falls
        back to the module height when no door piece exists (for example
        when a manual override reshaped the list).
        """
        hinges = None
        if module.door_count > 0:
            door_height = door_height_for(module, pieces)
            hinges = self.hinges(door_height, module.door_count)
        slides = SlideAssignment(pairs=module.drawer_count) if module.drawer_count else None
        return HardwareAssignment(
            module_id=module.id,
            legs=self.legs(module.width, module.zone),
            hinges=hinges,
            slides=slides,
        )

    def summarize(self, assignment: HardwareAssignment) -> list[str]:
        lines: list[str] = []
        if assignment.legs is not None:
            lines.append(f"{assignment.legs.quantity} legs - {assignment.legs.reason}")
        if assignment.hinges is not None:
            hinges = assignment.hinges
            lines.append(
                f"{hinges.total} hinges ({hinges.per_door} per door) - {hinges.reason}"
            )
        if assignment.slides is not None:
            lines.append(f"{assignment.slides.pairs} slide pairs (1 per drawer)")
        return lines


def door_height_for(module: ModuleSpec, pieces: Iterable[Piece]) -> float:
    door = next(
        (p for p in pieces if p.module_id == module.id and p.role is PieceRole.DOOR),
        None,
    )
    return door.final_height if door is not None else module.height
