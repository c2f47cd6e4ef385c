"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from sheetcut.web.schemas.requests import SheetSchema


class CutSchema(BaseModel):
    """A placed piece."""

    id: int = Field(..., description="Piece id")
    label: str = Field(..., description="Display label (A..Z, A1, ...)")
    width: float = Field(..., description="Placed width, after rotation")
    height: float = Field(..., description="Placed height, after rotation")
    x: float = Field(..., description="Left edge on the sheet")
    y: float = Field(..., description="Top edge on the sheet")
    sheet: int = Field(..., description="0-based sheet index")
    rotated: bool = Field(..., description="Whether the piece was turned 90 degrees")


class SheetUsageSchema(BaseModel):
    """Usage of one sheet."""

    index: int = Field(..., description="0-based sheet index")
    cut_ids: list[int] = Field(..., description="Ids of the pieces on this sheet")
    used_area: float = Field(..., description="Area covered by pieces")
    waste_percentage: float = Field(..., description="Uncovered share of the sheet")


class PlanSummarySchema(BaseModel):
    """Totals across every sheet."""

    total_sheets: int
    total_cuts: int
    total_waste_percentage: float


class PlanResponseSchema(BaseModel):
    """Response for cut plan computation."""

    unit: str = Field(..., description="Display unit")
    sheet: SheetSchema = Field(..., description="Stock sheet dimensions")
    cuts: list[CutSchema] = Field(..., description="Cuts in placement order")
    sheets: list[SheetUsageSchema] = Field(..., description="Per-sheet usage")
    instructions: list[str] = Field(..., description="Human readable cutting steps")
    summary: PlanSummarySchema


class ValidationResultSchema(BaseModel):
    """Response for job file validation."""

    is_valid: bool = Field(..., description="Whether the job file is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )


class ErrorResponseSchema(BaseModel):
    """Body of every error response."""

    error: str
    error_type: str
    details: Any = None
