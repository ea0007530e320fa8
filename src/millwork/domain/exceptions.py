"""Domain exceptions for piece derivation, machining and costing."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects import BoundsViolation


class MillworkError(Exception):
    """Base class for all engine errors."""


class UnknownCatalogItemError(MillworkError):
    """Raised when a module references an id missing from the factory catalog.

    Attributes:
        item_id: The id that could not be resolved.
        kind: Catalog section searched (e.g. "material", "drawer_system").
    """

    def __init__(self, item_id: str, kind: str) -> None:
        self.item_id = item_id
        self.kind = kind
        super().__init__(f"Unknown {kind} '{item_id}' in factory catalog")


class UnknownPieceError(MillworkError):
    """Raised when an override command targets a piece id that does not exist."""

    def __init__(self, piece_id: str) -> None:
        self.piece_id = piece_id
        super().__init__(f"No piece with id '{piece_id}' in the generated cut list")


class MissingToolDepthError(MillworkError):
    """Raised when a drilling tool has no configured depth.

    Drilling depth comes from the hardware install profile or the factory
    tool table. There is no fallback value.
    """

    def __init__(self, tool_id: str) -> None:
        self.tool_id = tool_id
        super().__init__(
            f"No drilling depth configured for tool '{tool_id}'. "
            "Add it to the factory tool_depths or the hardware install profile."
        )


class MachiningBoundsError(MillworkError):
    """Raised when machining coordinates fall outside the piece.

    Attributes:
        piece_id: Id of the piece being machined (may be empty for ad-hoc geometry).
        violations: Every offending operation with its coordinate.
    """

    def __init__(self, piece_id: str, violations: tuple[BoundsViolation, ...]) -> None:
        self.piece_id = piece_id
        self.violations = violations
        lines = [f"Machining out of bounds on piece '{piece_id or '?'}':"]
        lines.extend(f"  - {v}" for v in violations)
        super().__init__("\n".join(lines))


class HingeLayoutError(MillworkError, ValueError):
    """Raised when a door is too short to fit hinges between its margins.

    Attributes:
        height: Door height in mm.
        bottom_margin: Margin below the first hinge cup.
        top_margin: Margin above the last hinge cup.
    """

    def __init__(self, height: float, bottom_margin: float, top_margin: float) -> None:
        self.height = height
        self.bottom_margin = bottom_margin
        self.top_margin = top_margin
        super().__init__(
            f"Door height {height:g} leaves no room between hinge margins "
            f"({bottom_margin:g} + {top_margin:g})"
        )
