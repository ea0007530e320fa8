"""Bounds validation shared by every machining operation family."""

from __future__ import annotations

from collections.abc import Iterable

from ...exceptions import MachiningBoundsError
from ...value_objects import BoundsViolation, MachiningOperation, PieceGeometry
from .constants import BOUNDS_TOLERANCE

__all__ = ["find_violations", "validate_operations"]


def find_violations(
    geometry: PieceGeometry, operations: Iterable[MachiningOperation]
) -> list[BoundsViolation]:
    """Operations whose tool circle does not fit inside its face.

    Each operation must satisfy ``r <= x <= W - r`` and ``r <= y <= H - r``
    where W x H is the rectangle of the face it is machined on.
    """
    violations = []
    for op in operations:
        face_width, face_height = geometry.face_bounds(op.face)
        r = op.radius
        for axis, value, limit in (("x", op.x, face_width), ("y", op.y, face_height)):
            low, high = r, limit - r
            if value < low - BOUNDS_TOLERANCE or value > high + BOUNDS_TOLERANCE:
                violations.append(
                    BoundsViolation(
                        operation=op, axis=axis, coordinate=value, minimum=low, maximum=high
                    )
                )
    return violations


def validate_operations(
    geometry: PieceGeometry, operations: list[MachiningOperation]
) -> list[MachiningOperation]:
    """Return ``operations`` unchanged, or raise if any leaves the piece.

    Nothing is clamped or dropped.

    Raises:
        MachiningBoundsError: With every violation found.
    """
    violations = find_violations(geometry, operations)
    if violations:
        raise MachiningBoundsError(geometry.piece_id, tuple(violations))
    return operations
