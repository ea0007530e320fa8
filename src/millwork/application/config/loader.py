"""Project file loader with error reporting.

Loads a JSON project file and validates it against ProjectConfiguration.
File system, JSON syntax and schema problems are all reported as
ConfigError with an error_type and per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from millwork.application.config.schemas import ProjectConfiguration
from millwork.domain.exceptions import MillworkError


class ConfigError(MillworkError):
    """Raised when a project file cannot be loaded or validated.

    Attributes:
        message: The primary error message.
        error_type: file_not_found, permission_denied, file_read_error,
            json_parse, validation or catalog.
        path: Path to the project file, if any.
        details: Per-error details (line/column for JSON, field path for validation).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a dotted path.

    Examples:
        >>> _format_json_path(("factory", "materials", 0, "thickness"))
        'factory.materials[0].thickness'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Project validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        # Whole-object inputs are too noisy to echo back.
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def load_config(path: Path) -> ProjectConfiguration:
    """Load and validate a project file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema. ``error_type`` tells which.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Project file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading project file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading project file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in project file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Validate a project given as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )
