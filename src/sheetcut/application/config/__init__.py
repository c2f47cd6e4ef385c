"""Job file schema and loading for cut plans.

Public API:
    - CutPlanConfiguration: Root job file model
    - SheetConfig, PieceConfig, OutputConfig, SvgOutputConfig: Nested models
    - OutputFormat: Console output format enum
    - load_config: Load a job file from disk
    - load_config_from_dict: Validate an already-parsed job description
    - ConfigError: Exception for job file errors
    - config_to_inputs: Convert a job file to command inputs
    - validate_config: Check that every piece fits the sheet

Example:
    >>> from pathlib import Path
    >>> from sheetcut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("shelves.json"))
    ...     print(f"Sheet: {config.sheet.width}x{config.sheet.height} {config.unit.value}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sheetcut.application.config.adapter import config_to_inputs
from sheetcut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sheetcut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CutPlanConfiguration,
    OutputConfig,
    OutputFormat,
    PieceConfig,
    SheetConfig,
    SvgOutputConfig,
)
from sheetcut.application.config.validator import (
    ValidationIssue,
    ValidationResult,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CutPlanConfiguration",
    "OutputConfig",
    "OutputFormat",
    "PieceConfig",
    "SheetConfig",
    "SvgOutputConfig",
    "ValidationIssue",
    "ValidationResult",
    "config_to_inputs",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
