"""Integration tests for the validate CLI command.

These tests verify the validate command works end-to-end, including:
- The example project passes validation
- Missing, malformed and invalid project files exit with code 1
- Machining safety failures exit with code 3
- Banding that consumes a piece is reported as a warning (exit code 2)
"""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from millwork.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


def write_project(tmp_path: Path, data: dict[str, Any]) -> Path:
    path = tmp_path / "project.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestValidateCommand:
    """Tests for the validate command."""

    def test_example_project(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(project_file)])

        assert result.exit_code in [0, 2]
        assert "Validation passed" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{ not json", encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 1" in result.output

    def test_unknown_field_rejected(
        self, runner: CliRunner, tmp_path: Path, project_data: dict[str, Any]
    ) -> None:
        project_data["factory"]["carcass"]["glue"] = "pva"

        result = runner.invoke(app, ["validate", str(write_project(tmp_path, project_data))])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "factory.carcass.glue" in result.output

    def test_unknown_override_piece(
        self, runner: CliRunner, tmp_path: Path, project_data: dict[str, Any]
    ) -> None:
        project_data["modules"][1]["overrides"][0]["piece_id"] = "b2-shelf-9"

        result = runner.invoke(app, ["validate", str(write_project(tmp_path, project_data))])

        assert result.exit_code == 1
        assert "b2-shelf-9" in result.output

    def test_missing_tool_depth(
        self, runner: CliRunner, tmp_path: Path, project_data: dict[str, Any]
    ) -> None:
        del project_data["factory"]["tool_depths"]["POCKET_15MM"]

        result = runner.invoke(app, ["validate", str(write_project(tmp_path, project_data))])

        assert result.exit_code == 3
        assert "Machining error" in result.output
        assert "POCKET_15MM" in result.output

    def test_consumed_piece_is_a_warning(
        self, runner: CliRunner, tmp_path: Path, project_data: dict[str, Any]
    ) -> None:
        project_data["modules"] = [project_data["modules"][1]]
        project_data["modules"][0]["overrides"] = [
            {"op": "set_final_width", "piece_id": "b2-shelf-1", "value": 0.5}
        ]

        result = runner.invoke(app, ["validate", str(write_project(tmp_path, project_data))])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "b2-shelf-1" in result.output
