"""CLI command implementations for the millwork application.

This package contains shared helpers and subcommands for the millwork CLI:
- validate: Validate a project file
"""

from millwork.cli.commands.validate import validate_command

__all__ = ["validate_command"]
