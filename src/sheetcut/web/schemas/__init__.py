"""Pydantic schemas for the REST API."""

from sheetcut.web.schemas.requests import (
    ConfigValidateRequest,
    PieceSchema,
    PlanRequest,
    SheetSchema,
)
from sheetcut.web.schemas.responses import (
    CutSchema,
    ErrorResponseSchema,
    PlanResponseSchema,
    PlanSummarySchema,
    SheetUsageSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "PieceSchema",
    "PlanRequest",
    "SheetSchema",
    # Responses
    "CutSchema",
    "ErrorResponseSchema",
    "PlanResponseSchema",
    "PlanSummarySchema",
    "SheetUsageSchema",
    "ValidationResultSchema",
]
