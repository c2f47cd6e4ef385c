"""Job file validation endpoints."""

from fastapi import APIRouter

from sheetcut.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from sheetcut.web.schemas.requests import ConfigValidateRequest
from sheetcut.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_job(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate a job description without computing a plan.

    Schema errors and oversized pieces are both reported as errors with
    a JSON path and message.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[{"message": d["message"], "path": d["path"]} for d in e.details],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
    )
