"""Finished-to-cut dimension resolution.

Edge bands on the L slots (top/bottom) run along the width axis but take
their thickness off the height. Bands on the A slots (left/right) run
along the height axis and take their thickness off the width.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Mapping

from ..value_objects import CutDimensions, EdgeDiscounts, EdgeSlot, Material

if TYPE_CHECKING:
    from ..entities import Piece

__all__ = [
    "edge_consumption",
    "edge_thickness",
    "resolve",
    "round_half_up",
    "round_to_tenth",
]


def round_half_up(value: float, places: int = 1) -> float:
    """Round to ``places`` decimals with halves going up (towards +inf)."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def round_to_tenth(value: float) -> float:
    return round_half_up(value, 1)


def edge_thickness(
    band: Material | None, edge_materials: Mapping[str, Material] | None = None
) -> float:
    """Thickness of a slot's band, preferring the catalog entry with the same id."""
    if band is None:
        return 0.0
    if edge_materials and band.id in edge_materials:
        return edge_materials[band.id].thickness
    return band.thickness


def resolve(
    piece: Piece, edge_materials: Mapping[str, Material] | None = None
) -> CutDimensions:
    """Compute saw-cut dimensions for a piece.

    Args:
        piece: Piece with final dimensions and edge slots.
        edge_materials: Optional catalog of edge bands by id. When given,
            its thicknesses win over the ones stored on the piece.

    Returns:
        CutDimensions rounded to 0.1 mm and floored at 0. The raw
        discounts are kept even when flooring happened.
    """
    discounts = EdgeDiscounts(
        l1=edge_thickness(piece.edge_l1, edge_materials),
        l2=edge_thickness(piece.edge_l2, edge_materials),
        a1=edge_thickness(piece.edge_a1, edge_materials),
        a2=edge_thickness(piece.edge_a2, edge_materials),
    )
    raw_width = round_to_tenth(piece.final_width - discounts.width)
    raw_height = round_to_tenth(piece.final_height - discounts.height)
    return CutDimensions(
        cut_width=max(raw_width, 0.0),
        cut_height=max(raw_height, 0.0),
        discounts=discounts,
        floored=raw_width < 0 or raw_height < 0,
    )


def edge_consumption(piece: Piece) -> dict[EdgeSlot, float]:
    """Banding length in mm used per occupied slot, across all copies.

    L slots consume the final width, A slots the final height.
    """
    lengths: dict[EdgeSlot, float] = {}
    for slot, band in piece.edges.items():
        if band is None:
            continue
        along = piece.final_width if slot in (EdgeSlot.L1, EdgeSlot.L2) else piece.final_height
        lengths[slot] = along * piece.quantity
    return lengths
