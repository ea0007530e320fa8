"""Hardware quantity assignments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LegAssignment:
    quantity: int
    reason: str


@dataclass(frozen=True)
class HingeAssignment:
    """Hinge count for a module's doors.

    Attributes:
        per_door: Hinges on each door.
        total: per_door times door count.
        reason: Which height bracket applied.
    """

    per_door: int
    total: int
    reason: str


@dataclass(frozen=True)
class SlideAssignment:
    pairs: int


@dataclass(frozen=True)
class HardwareAssignment:
    """Hardware computed for one module. Absent hardware is None."""

    module_id: str
    legs: LegAssignment | None = None
    hinges: HingeAssignment | None = None
    slides: SlideAssignment | None = None
