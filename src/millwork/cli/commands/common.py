"""Project loading and error display shared by the CLI commands."""

from pathlib import Path

import typer

from millwork.application import PlanProjectCommand, ProjectPlan
from millwork.application.config import ConfigError, config_to_project, load_config
from millwork.application.config.schemas import ProjectConfiguration
from millwork.domain.entities import FactoryCatalog, ModuleSpec
from millwork.domain.exceptions import (
    HingeLayoutError,
    MachiningBoundsError,
    MissingToolDepthError,
    UnknownCatalogItemError,
    UnknownPieceError,
)

EXIT_CONFIG_ERROR = 1
EXIT_WARNINGS = 2
EXIT_MACHINING_ERROR = 3


def display_load_error(error: ConfigError) -> None:
    """Display a project loading error on stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_project(
    config_file: Path,
) -> tuple[ProjectConfiguration, FactoryCatalog, list[ModuleSpec]]:
    """Load a project file or exit with code 1 after reporting why."""
    try:
        config = load_config(config_file)
        factory, modules = config_to_project(config)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    except UnknownCatalogItemError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    return config, factory, modules


def exit_for_machining_error(error: Exception) -> None:
    """Report a machining safety failure and exit with code 3."""
    typer.echo(f"Machining error: {error}", err=True)
    raise typer.Exit(code=EXIT_MACHINING_ERROR)


def plan_project(
    config: ProjectConfiguration,
    factory: FactoryCatalog,
    modules: list[ModuleSpec],
    include_machining: bool = False,
) -> ProjectPlan:
    """Run PlanProjectCommand, mapping engine errors to exit codes."""
    try:
        return PlanProjectCommand().execute(
            factory,
            modules,
            project_name=config.project_name,
            include_machining=include_machining,
        )
    except (MachiningBoundsError, MissingToolDepthError, HingeLayoutError) as e:
        exit_for_machining_error(e)
    except (UnknownCatalogItemError, UnknownPieceError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
