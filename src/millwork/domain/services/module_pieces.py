"""Rule-based carcass piece generation for BASE, WALL and TOWER modules."""

from __future__ import annotations

import logging

from ..entities import FactoryCatalog, ModuleSpec, Piece, piece_id
from ..value_objects import (
    BackMounting,
    DoorInstallation,
    Material,
    PieceRole,
    Zone,
)
from .dimension_resolver import round_to_tenth
from .drawer_pieces import DrawerConfig, DrawerPieceGenerator

logger = logging.getLogger(__name__)

__all__ = ["ModulePieceGenerator"]


class ModulePieceGenerator:
    """Generates a module's pieces purely from its spec and the factory catalog.

    Manual overrides are not applied here; see ``overrides.apply_overrides``.
    """

    def __init__(self, drawer_generator: DrawerPieceGenerator | None = None) -> None:
        self._drawers = drawer_generator or DrawerPieceGenerator()

    def generate(self, spec: ModuleSpec, factory: FactoryCatalog) -> list[Piece]:
        board = factory.board_for(spec)
        rules = factory.carcass.edge_rules
        ctx = _Context(
            spec=spec,
            board=board,
            door_band=factory.edge(rules.doors),
            visible=factory.edge(rules.visible),
            internal=factory.edge(rules.internal),
        )

        pieces = self._laterals(ctx)
        if spec.zone is Zone.BASE:
            pieces.append(self._horizontal(ctx, PieceRole.FLOOR, "Floor"))
            pieces.append(self._stretchers(ctx, factory.carcass.stretcher_height))
        else:
            pieces.append(self._horizontal(ctx, PieceRole.FLOOR, "Floor"))
            pieces.append(self._horizontal(ctx, PieceRole.CEILING, "Ceiling"))

        shelf_count = spec.shelf_count
        if shelf_count is None and spec.zone is Zone.TOWER:
            shelf_count = factory.carcass.tower_shelf_count
        if shelf_count:
            pieces.append(self._shelves(ctx, factory, shelf_count))

        pieces.append(self._back(ctx, factory.back_board()))

        if spec.door_count > 0:
            pieces.extend(self._doors(ctx, factory))
        if spec.drawer_count > 0:
            pieces.extend(self._drawer_pieces(spec, factory, board))

        logger.debug("Module %s generated %d pieces", spec.id, len(pieces))
        return pieces

    def _laterals(self, ctx: _Context) -> list[Piece]:
        spec = ctx.spec
        return [
            ctx.piece(
                PieceRole.LATERAL,
                name,
                spec.depth,
                spec.height,
                ordinal=ordinal,
                edge_l1=ctx.internal,
                edge_l2=ctx.internal,
                edge_a1=ctx.visible,
                edge_a2=ctx.internal,
            )
            for ordinal, name in ((1, "Left lateral"), (2, "Right lateral"))
        ]

    def _horizontal(self, ctx: _Context, role: PieceRole, name: str) -> Piece:
        return ctx.piece(
            role,
            name,
            ctx.internal_width,
            ctx.spec.depth,
            edge_l1=ctx.visible,
            edge_l2=ctx.internal,
            edge_a1=ctx.internal,
            edge_a2=ctx.internal,
        )

    def _stretchers(self, ctx: _Context, height: float) -> Piece:
        return ctx.piece(
            PieceRole.STRETCHER,
            "Top stretcher",
            ctx.internal_width,
            height,
            quantity=2,
            edge_l1=ctx.internal,
            edge_l2=ctx.internal,
            edge_a1=ctx.internal,
            edge_a2=ctx.internal,
        )

    def _shelves(self, ctx: _Context, factory: FactoryCatalog, count: int) -> Piece:
        carcass = factory.carcass
        return ctx.piece(
            PieceRole.SHELF,
            "Shelf",
            ctx.internal_width - carcass.shelf_clearance,
            ctx.spec.depth - carcass.shelf_setback,
            quantity=count,
            edge_l1=ctx.visible,
            edge_l2=ctx.internal,
            edge_a1=ctx.internal,
            edge_a2=ctx.internal,
        )

    def _back(self, ctx: _Context, back_board: Material) -> Piece:
        spec = ctx.spec
        if spec.back_mounting is BackMounting.INSET:
            width = ctx.internal_width
            height = spec.height - ctx.board.thickness
        else:
            width, height = spec.width, spec.height
        return ctx.piece(PieceRole.BACK, "Back panel", width, height, material=back_board)

    def _doors(self, ctx: _Context, factory: FactoryCatalog) -> list[Piece]:
        spec = ctx.spec
        carcass = factory.carcass
        gap = carcass.door_gap
        if carcass.door_installation is DoorInstallation.INSET:
            width = ctx.internal_width - gap
            if spec.door_count > 1:
                width = width / spec.door_count - gap / 2
            height = spec.height - 2 * gap
        else:
            width = spec.width / spec.door_count - gap
            height = spec.height - carcass.overlay_door_reduction

        return [
            ctx.piece(
                PieceRole.DOOR,
                f"Door {ordinal}" if spec.door_count > 1 else "Door",
                width,
                height,
                ordinal=ordinal,
                edge_l1=ctx.door_band,
                edge_l2=ctx.door_band,
                edge_a1=ctx.door_band,
                edge_a2=ctx.door_band,
            )
            for ordinal in range(1, spec.door_count + 1)
        ]

    def _drawer_pieces(
        self, spec: ModuleSpec, factory: FactoryCatalog, board: Material
    ) -> list[Piece]:
        if spec.drawer_system_id is None:
            raise ValueError(f"Module '{spec.id}' has drawers but no drawer_system_id")
        config = DrawerConfig(
            module_id=spec.id,
            module_width=spec.width,
            module_depth=spec.depth,
            module_height=spec.height,
            drawer_count=spec.drawer_count,
            system=factory.drawer_system(spec.drawer_system_id),
            board=board,
            edge_band=factory.edge(factory.carcass.drawer_edge_id),
            category=spec.zone.value,
        )
        return self._drawers.generate(config)


class _Context:
    """Per-call values shared by the piece builders."""

    def __init__(
        self,
        spec: ModuleSpec,
        board: Material,
        door_band: Material | None,
        visible: Material | None,
        internal: Material | None,
    ) -> None:
        self.spec = spec
        self.board = board
        self.door_band = door_band
        self.visible = visible
        self.internal = internal

    @property
    def internal_width(self) -> float:
        return self.spec.width - 2 * self.board.thickness

    def piece(
        self,
        role: PieceRole,
        name: str,
        width: float,
        height: float,
        ordinal: int = 1,
        quantity: int = 1,
        material: Material | None = None,
        **edges: Material | None,
    ) -> Piece:
        return Piece(
            id=piece_id(self.spec.id, role, ordinal),
            module_id=self.spec.id,
            name=name,
            role=role,
            final_width=round_to_tenth(width),
            final_height=round_to_tenth(height),
            material=material or self.board,
            quantity=quantity,
            category=self.spec.zone.value,
            **edges,
        )
