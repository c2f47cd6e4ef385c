"""CLI command implementations for the sheetcut application.

This package contains subcommands for the sheetcut CLI, including:
- validate: Validate a job file
"""

from sheetcut.cli.commands.validate import validate_command

__all__ = ["validate_command"]
