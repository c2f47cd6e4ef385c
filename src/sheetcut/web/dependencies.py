"""FastAPI dependency injection for planning services."""

from typing import Annotated

from fastapi import Depends

from sheetcut.application.commands import CalculateCutsCommand


def get_calculate_command() -> CalculateCutsCommand:
    """Dependency for CalculateCutsCommand."""
    return CalculateCutsCommand()


# Type aliases for cleaner endpoint signatures
CalculateCommandDep = Annotated[CalculateCutsCommand, Depends(get_calculate_command)]
