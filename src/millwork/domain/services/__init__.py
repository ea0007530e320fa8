"""Domain services for piece derivation, hardware, costing and machining.

- Dimension resolution (finished to cut size)
- Carcass and drawer piece generation
- Manual overrides and cut list building
- Hardware rules and cost aggregation
- CNC machining coordinates
"""

from .cost_aggregator import (
    CostAggregator,
    cost_engine_hinges_per_door,
    machine_operation,
    screw_count,
)
from .cut_list import (
    BillOfMaterials,
    PieceList,
    bill_of_materials,
    build_piece_list,
    cut_list_warnings,
)
from .dimension_resolver import (
    edge_consumption,
    edge_thickness,
    resolve,
    round_half_up,
    round_to_tenth,
)
from .drawer_pieces import DrawerConfig, DrawerPieceGenerator
from .hardware_rules import HardwareRuleEngine, door_height_for
from .machining import (
    MachiningCoordinateGenerator,
    MachiningPlanner,
    PieceMachining,
)
from .module_pieces import ModulePieceGenerator
from .overrides import (
    ModuleEdit,
    apply_overrides,
    edit_module,
    propagate_overrides,
    rekey_overrides,
)

__all__ = [
    # Dimensions
    "edge_consumption",
    "edge_thickness",
    "resolve",
    "round_half_up",
    "round_to_tenth",
    # Piece generation
    "DrawerConfig",
    "DrawerPieceGenerator",
    "ModulePieceGenerator",
    # Cut list and overrides
    "BillOfMaterials",
    "ModuleEdit",
    "PieceList",
    "apply_overrides",
    "bill_of_materials",
    "build_piece_list",
    "cut_list_warnings",
    "edit_module",
    "propagate_overrides",
    "rekey_overrides",
    # Hardware and cost
    "CostAggregator",
    "HardwareRuleEngine",
    "cost_engine_hinges_per_door",
    "door_height_for",
    "machine_operation",
    "screw_count",
    # Machining
    "MachiningCoordinateGenerator",
    "MachiningPlanner",
    "PieceMachining",
]
