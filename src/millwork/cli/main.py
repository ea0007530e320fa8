"""Typer CLI for cut lists, quotes and CNC machining files."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from millwork.cli.commands import validate_command
from millwork.cli.commands.common import load_project, plan_project
from millwork.infrastructure import (
    CostReportFormatter,
    CsvCutListExporter,
    CutListFormatter,
    ExportManager,
    HardwareReportFormatter,
    MaterialReportFormatter,
    format_project_summary,
)

app = typer.Typer(
    name="millwork",
    help="Derive cut lists, quotes and CNC drilling files for modular furniture.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log progress and warnings to stderr"),
    ] = False,
) -> None:
    """Modular furniture manufacturing engine."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def cutlist(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    csv_file: Annotated[
        Path | None,
        typer.Option("--csv", help="Also write the optimizer CSV to this path"),
    ] = None,
    materials: Annotated[
        bool,
        typer.Option("--materials", help="Append board area and edge banding totals"),
    ] = False,
) -> None:
    """Print the cut list with finished and saw-cut sizes."""
    config, factory, modules = load_project(config_file)
    plan = plan_project(config, factory, modules)

    typer.echo(format_project_summary(plan))
    typer.echo()
    typer.echo(CutListFormatter().format(plan.pieces))

    warnings = CutListFormatter().format_warnings(plan.warnings)
    if warnings:
        typer.echo()
        typer.echo(warnings)

    if materials:
        typer.echo()
        typer.echo(MaterialReportFormatter().format(plan.pieces))

    if csv_file is not None:
        csv_file.parent.mkdir(parents=True, exist_ok=True)
        CsvCutListExporter().export(plan, csv_file)
        typer.echo()
        typer.echo(f"CSV cut list written to {csv_file}")


@app.command()
def quote(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    hardware: Annotated[
        bool,
        typer.Option("--hardware", help="List hardware per module"),
    ] = False,
) -> None:
    """Print the cost breakdown and suggested price."""
    config, factory, modules = load_project(config_file)
    plan = plan_project(config, factory, modules)

    typer.echo(CostReportFormatter().format(plan.cost, plan.project_name))
    if hardware:
        typer.echo()
        typer.echo(HardwareReportFormatter().format(plan.modules))


@app.command()
def machining(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for DXF and JSON files"),
    ],
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="File name prefix (default: project file name)"),
    ] = None,
) -> None:
    """Write one DXF per machined piece plus a machining JSON report."""
    config, factory, modules = load_project(config_file)
    plan = plan_project(config, factory, modules, include_machining=True)

    manager = ExportManager(output_dir)
    results = manager.export_all(["dxf", "json"], plan, project_name or config_file.stem)

    total_ops = sum(len(m.operations) for m in plan.machining)
    typer.echo(f"Machined {len(plan.machining)} piece(s), {total_ops} operation(s)")
    for format_name, path in results.items():
        typer.echo(f"  {format_name}: {path}")


if __name__ == "__main__":
    app()
