"""Typed manual edits replayed on top of rule-generated pieces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ._pieces import EdgeSlot


@dataclass(frozen=True)
class SetFinalWidth:
    piece_id: str
    value: float

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Final width must be positive")


@dataclass(frozen=True)
class SetFinalHeight:
    piece_id: str
    value: float

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Final height must be positive")


@dataclass(frozen=True)
class SetQuantity:
    piece_id: str
    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Quantity must be at least 1")


@dataclass(frozen=True)
class SetEdge:
    """Put an edge band on (or remove it from, with ``edge_id=None``) a slot."""

    piece_id: str
    slot: EdgeSlot
    edge_id: str | None


PieceOverride = Union[SetFinalWidth, SetFinalHeight, SetQuantity, SetEdge]
