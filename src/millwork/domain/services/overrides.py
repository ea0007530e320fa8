"""Manual piece overrides and module edits.

A module's pieces are always regenerated from its ModuleSpec. Manual edits are
stored on the ModuleSpec as typed override commands and replayed on top of the
regenerated pieces. Changing a field that decides which pieces exist
(door/drawer counts, drawer system, hinge, slide, zone or shelf count)
clears the overrides and tells the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import Executor
from dataclasses import dataclass, replace
from typing import Any

from ..entities import APERTURE_FIELDS, ModuleSpec, Piece
from ..exceptions import UnknownCatalogItemError, UnknownPieceError
from ..value_objects import (
    Material,
    PieceOverride,
    SetEdge,
    SetFinalHeight,
    SetFinalWidth,
    SetQuantity,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ModuleEdit",
    "apply_overrides",
    "edit_module",
    "propagate_overrides",
    "rekey_overrides",
]


@dataclass(frozen=True)
class ModuleEdit:
    """Result of editing a module.

    Attributes:
        spec: The edited module.
        overrides_invalidated: True when manual overrides were cleared
            because an aperture-affecting field changed.
    """

    spec: ModuleSpec
    overrides_invalidated: bool = False


def apply_overrides(
    pieces: Sequence[Piece],
    overrides: Iterable[PieceOverride],
    edge_materials: Mapping[str, Material] | None = None,
) -> list[Piece]:
    """Replay override commands on a piece list and return new pieces.

    Commands are applied in order, so a later command on the same piece
    and field wins.

    Raises:
        UnknownPieceError: A command targets a piece id not in ``pieces``.
        UnknownCatalogItemError: A SetEdge names a band not in ``edge_materials``.
    """
    by_id = {piece.id: piece for piece in pieces}
    for command in overrides:
        if command.piece_id not in by_id:
            raise UnknownPieceError(command.piece_id)
        by_id[command.piece_id] = _apply(by_id[command.piece_id], command, edge_materials)
    return [by_id[piece.id] for piece in pieces]


def _apply(
    piece: Piece,
    command: PieceOverride,
    edge_materials: Mapping[str, Material] | None,
) -> Piece:
    match command:
        case SetFinalWidth(value=value):
            return replace(piece, final_width=value)
        case SetFinalHeight(value=value):
            return replace(piece, final_height=value)
        case SetQuantity(value=value):
            return replace(piece, quantity=value)
        case SetEdge(slot=slot, edge_id=None):
            return piece.with_edge(slot, None)
        case SetEdge(slot=slot, edge_id=edge_id):
            band = (edge_materials or {}).get(edge_id)
            if band is None or not band.is_edge:
                raise UnknownCatalogItemError(edge_id, "edge material")
            return piece.with_edge(slot, band)
    raise TypeError(f"Unsupported override command: {command!r}")


def edit_module(spec: ModuleSpec, **changes: Any) -> ModuleEdit:
    """Apply field changes to a module.

    Overrides survive resizes and other non-conflicting edits. If an
    aperture-affecting field actually changes value, the overrides are
    cleared and ``overrides_invalidated`` is set.
    """
    edited = replace(spec, **changes)
    aperture_changed = any(
        getattr(spec, name) != getattr(edited, name) for name in APERTURE_FIELDS
    )
    if aperture_changed and edited.overrides:
        logger.warning(
            "Module %s: aperture change invalidated %d manual override(s)",
            spec.id,
            len(edited.overrides),
        )
        return ModuleEdit(spec=replace(edited, overrides=()), overrides_invalidated=True)
    return ModuleEdit(spec=edited)


def rekey_overrides(
    overrides: Iterable[PieceOverride], source_id: str, target_id: str
) -> tuple[PieceOverride, ...]:
    """Point override commands at another module's pieces.

    Piece ids are ``<module id>-<role>-<ordinal>``, so only the module
    prefix changes.
    """
    prefix = f"{source_id}-"
    rekeyed = []
    for command in overrides:
        if not command.piece_id.startswith(prefix):
            raise UnknownPieceError(command.piece_id)
        suffix = command.piece_id[len(prefix):]
        rekeyed.append(replace(command, piece_id=f"{target_id}-{suffix}"))
    return tuple(rekeyed)


def _propagate_one(source: ModuleSpec, sibling: ModuleSpec) -> ModuleSpec:
    if (
        sibling.id == source.id
        or source.template_id is None
        or sibling.template_id != source.template_id
        or sibling.aperture_signature != source.aperture_signature
    ):
        return sibling
    return replace(
        sibling, overrides=rekey_overrides(source.overrides, source.id, sibling.id)
    )


def propagate_overrides(
    source: ModuleSpec,
    siblings: Sequence[ModuleSpec],
    executor: Executor | None = None,
) -> list[ModuleSpec]:
    """Copy ``source``'s overrides to siblings built from the same template.

    Only siblings sharing the template id and aperture signature receive
    them. Each sibling is handled independently, so the result does not
    depend on the order of ``siblings`` or on whether an executor is used.

    Args:
        source: Module whose overrides are copied.
        siblings: Candidate modules.
        executor: Optional executor to process siblings in parallel.

    Returns:
        The siblings, in input order, with overrides replaced where applicable.
    """
    if executor is None:
        return [_propagate_one(source, sibling) for sibling in siblings]
    return list(executor.map(_propagate_one, [source] * len(siblings), siblings))
