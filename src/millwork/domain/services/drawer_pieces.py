"""Drawer box piece generation for metal and melamine drawer systems."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import Piece, piece_id
from ..value_objects import (
    BottomConstruction,
    DrawerSystem,
    Material,
    MelamineDrawerSystem,
    MetalDrawerSystem,
    PieceRole,
)
from .dimension_resolver import round_to_tenth

logger = logging.getLogger(__name__)

__all__ = ["DrawerConfig", "DrawerPieceGenerator"]

# Metal boxes only need a back panel this fraction of the drawer height.
METAL_BACK_RATIO = 0.6
# Internal back of a melamine box, relative to its internal height.
MELAMINE_BACK_RATIO = 0.7
# Grooved bottoms are this much smaller than the nailed size on each axis.
GROOVE_ALLOWANCE = 4.0


@dataclass(frozen=True)
class DrawerConfig:
    """Inputs for one module's drawer stack.

    Attributes:
        module_id: Owning module, used for piece ids.
        module_width: Outer module width in mm.
        module_depth: Module depth in mm.
        module_height: Height shared by all drawers in mm.
        drawer_count: Number of drawers (at least 1).
        system: Drawer box system.
        board: Board the drawer pieces are cut from.
        edge_band: Band for banded drawer edges. When None a band as thick
            as the board is used.
        category: Reporting group copied onto each piece.
    """

    module_id: str
    module_width: float
    module_depth: float
    module_height: float
    drawer_count: int
    system: DrawerSystem
    board: Material
    edge_band: Material | None = None
    category: str = ""

    def __post_init__(self) -> None:
        if self.drawer_count < 1:
            raise ValueError("drawer_count must be at least 1")

    @property
    def band(self) -> Material:
        return self.edge_band or Material.board_thickness_band(self.board.thickness)

    @property
    def drawer_width(self) -> float:
        return self.module_width - 2 * self.system.slide_clearance

    @property
    def drawer_depth(self) -> float:
        return self.module_depth - self.system.backend_clearance

    @property
    def drawer_height(self) -> float:
        return self.module_height / self.drawer_count


class DrawerPieceGenerator:
    """Builds the cut pieces of a drawer stack.

    Metal systems (Tandembox style) only need a bottom and a back. Melamine
    boxes are made of six pieces. Every piece type carries
    ``quantity = drawer_count``.
    """

    def generate(self, config: DrawerConfig) -> list[Piece]:
        match config.system:
            case MetalDrawerSystem():
                pieces = self._metal(config)
            case MelamineDrawerSystem(bottom_construction=construction):
                pieces = self._melamine(config, construction)
            case other:
                raise TypeError(f"Unsupported drawer system: {other!r}")
        logger.debug(
            "Generated %d drawer piece types for module %s (%s)",
            len(pieces),
            config.module_id,
            config.system.kind,
        )
        return pieces

    def _piece(
        self,
        config: DrawerConfig,
        role: PieceRole,
        name: str,
        width: float,
        height: float,
        ordinal: int = 1,
        **edges: Material | None,
    ) -> Piece:
        return Piece(
            id=piece_id(config.module_id, role, ordinal),
            module_id=config.module_id,
            name=name,
            role=role,
            final_width=round_to_tenth(width),
            final_height=round_to_tenth(height),
            material=config.board,
            quantity=config.drawer_count,
            category=config.category,
            **edges,
        )

    def _metal(self, config: DrawerConfig) -> list[Piece]:
        band = config.band
        return [
            self._piece(
                config,
                PieceRole.DRAWER_BOTTOM,
                "Drawer bottom (metal system)",
                config.drawer_width,
                config.drawer_depth,
            ),
            self._piece(
                config,
                PieceRole.DRAWER_BACK,
                "Drawer back (metal system)",
                config.drawer_width,
                config.drawer_height * METAL_BACK_RATIO,
                edge_l1=band,
                edge_a1=band,
                edge_a2=band,
            ),
        ]

    def _melamine(
        self, config: DrawerConfig, construction: BottomConstruction
    ) -> list[Piece]:
        band = config.band
        thickness = config.board.thickness
        internal_height = config.drawer_height - thickness
        inner_width = config.drawer_width - 2 * thickness
        bottom_width = inner_width
        bottom_depth = config.drawer_depth - 2 * thickness
        if construction is BottomConstruction.GROOVED:
            bottom_width -= GROOVE_ALLOWANCE
            bottom_depth -= GROOVE_ALLOWANCE
            bottom_name = "Drawer bottom (grooved)"
        else:
            bottom_name = "Drawer bottom (nailed)"

        return [
            # Sides are mirror images: the banded vertical edge faces the front.
            self._piece(
                config,
                PieceRole.DRAWER_SIDE,
                "Drawer left side",
                config.drawer_depth,
                internal_height,
                ordinal=1,
                edge_l1=band,
                edge_a2=band,
            ),
            self._piece(
                config,
                PieceRole.DRAWER_SIDE,
                "Drawer right side",
                config.drawer_depth,
                internal_height,
                ordinal=2,
                edge_l1=band,
                edge_a1=band,
            ),
            self._piece(
                config,
                PieceRole.DRAWER_FRONT,
                "Drawer internal front",
                inner_width,
                internal_height,
                edge_l1=band,
            ),
            self._piece(
                config,
                PieceRole.DRAWER_BACK,
                "Drawer internal back",
                inner_width,
                internal_height * MELAMINE_BACK_RATIO,
                edge_l1=band,
            ),
            self._piece(
                config,
                PieceRole.DRAWER_BOTTOM,
                bottom_name,
                bottom_width,
                bottom_depth,
            ),
            self._piece(
                config,
                PieceRole.DRAWER_FACE,
                "Drawer face",
                config.module_width,
                config.drawer_height,
                edge_l1=band,
                edge_l2=band,
                edge_a1=band,
                edge_a2=band,
            ),
        ]
