"""Validate command for checking project files.

This module provides the `validate` command. It loads a JSON project file,
derives every module's pieces and machining, and reports schema errors,
catalog problems and cut list warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from millwork.cli.commands.common import (
    EXIT_WARNINGS,
    load_project,
    plan_project,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a project file.

    Checks the project file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown catalog ids, etc.)
    - Machining safety (bounds and drilling depths)
    - Pieces whose edge banding leaves no cut area

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors (cannot be used)
        2 - Project is valid but has warnings
        3 - Machining safety check failed

    Example:
        millwork validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    config, factory, modules = load_project(config_file)
    plan = plan_project(config, factory, modules, include_machining=True)

    if plan.warnings:
        typer.echo("Warnings:")
        for warning in plan.warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo(f"Validation passed with {len(plan.warnings)} warning(s)")
        raise typer.Exit(code=EXIT_WARNINGS)

    typer.echo(
        f"Validation passed. {len(plan.modules)} module(s), "
        f"{sum(p.quantity for p in plan.pieces)} piece(s)."
    )
