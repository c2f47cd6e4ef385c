"""Job file loader with error reporting.

Reads a JSON job file, parses it and validates it against
CutPlanConfiguration. Every failure surfaces as a ConfigError whose
``error_type`` tells the caller which stage failed.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from sheetcut.application.config.schema import CutPlanConfiguration


class ConfigError(Exception):
    """Exception raised for job file errors.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation
        path: Path to the job file (if applicable)
        details: Additional error details (line/column for JSON, field
            errors for validation)
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
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("sheet", "width"))
        'sheet.width'
        >>> _format_json_path(("pieces", 2, "height"))
        'pieces[2].height'
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
    """Flatten a Pydantic ValidationError into path/message/value dicts."""
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
    lines = ["Job file validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_config(path: Path) -> CutPlanConfiguration:
    """Load and validate a job file.

    Args:
        path: Path to the JSON job file

    Returns:
        A validated CutPlanConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Job file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading job file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading job file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )
    except UnicodeDecodeError as e:
        raise ConfigError(
            message=f"Job file is not valid UTF-8: {path} (byte {e.start}): {e.reason}",
            error_type="file_read_error",
            path=path,
            details=[{"position": e.start, "message": e.reason}],
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in job file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    try:
        return CutPlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config_from_dict(data: dict[str, Any]) -> CutPlanConfiguration:
    """Validate a job description that is already parsed, e.g. from an API request.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return CutPlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )
