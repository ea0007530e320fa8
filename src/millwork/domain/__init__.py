"""Domain layer - pieces, hardware, costing and machining rules."""

from .entities import (
    APERTURE_FIELDS,
    CarcassSettings,
    EdgeRules,
    FactoryCatalog,
    ModuleSpec,
    Piece,
    piece_id,
)
from .exceptions import (
    HingeLayoutError,
    MachiningBoundsError,
    MillworkError,
    MissingToolDepthError,
    UnknownCatalogItemError,
    UnknownPieceError,
)

__all__ = [
    "APERTURE_FIELDS",
    "CarcassSettings",
    "EdgeRules",
    "FactoryCatalog",
    "HingeLayoutError",
    "MachiningBoundsError",
    "MillworkError",
    "MissingToolDepthError",
    "ModuleSpec",
    "Piece",
    "UnknownCatalogItemError",
    "UnknownPieceError",
    "piece_id",
]
