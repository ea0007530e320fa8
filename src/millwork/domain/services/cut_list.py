"""Cut list building and material rollup."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..entities import FactoryCatalog, ModuleSpec, Piece
from ..value_objects import CutListWarning
from .dimension_resolver import edge_consumption, resolve
from .module_pieces import ModulePieceGenerator
from .overrides import apply_overrides

logger = logging.getLogger(__name__)

__all__ = [
    "BillOfMaterials",
    "PieceList",
    "bill_of_materials",
    "build_piece_list",
    "cut_list_warnings",
]


@dataclass(frozen=True)
class PieceList:
    """Pieces for one module plus any non-fatal issues found while resolving them."""

    module_id: str
    pieces: tuple[Piece, ...]
    warnings: tuple[CutListWarning, ...] = ()

    @property
    def total_quantity(self) -> int:
        return sum(p.quantity for p in self.pieces)


@dataclass(frozen=True)
class BillOfMaterials:
    """Board area and edge length totals.

    Attributes:
        board_area_m2: Finished area per board material id.
        edge_meters: Banding length per edge material id.
    """

    board_area_m2: dict[str, float]
    edge_meters: dict[str, float]


def cut_list_warnings(pieces: Iterable[Piece]) -> list[CutListWarning]:
    """Warnings for pieces whose banding leaves no material to cut."""
    warnings = []
    for piece in pieces:
        cut = resolve(piece)
        if cut.floored or cut.cut_width <= 0 or cut.cut_height <= 0:
            message = (
                f"edge banding consumes the panel: final {piece.final_width:g}x"
                f"{piece.final_height:g}, edge discount {cut.discounts.width:g}x"
                f"{cut.discounts.height:g}, cut {cut.cut_width:g}x{cut.cut_height:g}"
            )
            logger.warning("Piece %s: %s", piece.id, message)
            warnings.append(CutListWarning(piece_id=piece.id, message=message))
    return warnings


def build_piece_list(
    spec: ModuleSpec,
    factory: FactoryCatalog,
    generator: ModulePieceGenerator | None = None,
) -> PieceList:
    """Regenerate a module's pieces and replay its overrides in one pass.

    Calling this twice with the same inputs yields equal results.
    """
    generator = generator or ModulePieceGenerator()
    pieces = generator.generate(spec, factory)
    if spec.overrides:
        pieces = apply_overrides(pieces, spec.overrides, factory.edge_materials)
    return PieceList(
        module_id=spec.id,
        pieces=tuple(pieces),
        warnings=tuple(cut_list_warnings(pieces)),
    )


def bill_of_materials(pieces: Iterable[Piece]) -> BillOfMaterials:
    """Roll pieces up into board area and edge length per material."""
    area: dict[str, float] = {}
    edges: dict[str, float] = {}
    for piece in pieces:
        area[piece.material.id] = area.get(piece.material.id, 0.0) + (
            piece.final_width * piece.final_height * piece.quantity / 1_000_000
        )
        for slot, length_mm in edge_consumption(piece).items():
            band = piece.edge(slot)
            edges[band.id] = edges.get(band.id, 0.0) + length_mm / 1000
    return BillOfMaterials(board_area_m2=area, edge_meters=edges)
