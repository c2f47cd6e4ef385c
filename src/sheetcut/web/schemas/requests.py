"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from sheetcut.domain import Unit


class SheetSchema(BaseModel):
    """Stock sheet dimensions."""

    width: float = Field(..., gt=0, allow_inf_nan=False, description="Sheet width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Sheet height")


class PieceSchema(BaseModel):
    """Requested piece, optionally repeated."""

    width: float = Field(..., gt=0, allow_inf_nan=False, description="Piece width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Piece height")
    quantity: int = Field(default=1, ge=1, le=500, description="Number of pieces")


class PlanRequest(BaseModel):
    """Request for computing a cut plan."""

    sheet: SheetSchema = Field(..., description="Stock sheet dimensions")
    pieces: list[PieceSchema] = Field(
        ..., min_length=1, max_length=1000, description="Pieces in insertion order"
    )
    unit: Unit = Field(default=Unit.CM, description="Display unit")


class ConfigValidateRequest(BaseModel):
    """Request for validating a job description."""

    config: dict[str, Any] = Field(..., description="Job file JSON")
