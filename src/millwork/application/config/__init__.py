"""Project file schema, loading and conversion to domain objects.

Public API:
    - ProjectConfiguration: Root project model
    - FactoryConfig / ModuleConfig: Catalog and module models
    - load_config: Load a project from a JSON file
    - load_config_from_dict: Load a project from a dictionary
    - ConfigError: Raised for any loading or validation failure
    - config_to_project: Convert a project to (FactoryCatalog, [ModuleSpec])

Example:
    >>> from pathlib import Path
    >>> from millwork.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from millwork.application.config.adapter import (
    config_to_factory,
    config_to_module,
    config_to_project,
)
from millwork.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from millwork.application.config.schemas import (
    SUPPORTED_VERSIONS,
    BoardMaterialConfig,
    CarcassConfig,
    CostConfig,
    EdgeMaterialConfig,
    FactoryConfig,
    HardwareMaterialConfig,
    MachineConfig,
    MelamineDrawerSystemConfig,
    MetalDrawerSystemConfig,
    ModuleConfig,
    ProjectConfiguration,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BoardMaterialConfig",
    "CarcassConfig",
    "ConfigError",
    "CostConfig",
    "EdgeMaterialConfig",
    "FactoryConfig",
    "HardwareMaterialConfig",
    "MachineConfig",
    "MelamineDrawerSystemConfig",
    "MetalDrawerSystemConfig",
    "ModuleConfig",
    "ProjectConfiguration",
    "config_to_factory",
    "config_to_module",
    "config_to_project",
    "load_config",
    "load_config_from_dict",
]
