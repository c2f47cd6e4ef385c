"""Pydantic schema for cut plan job files.

A job file describes the stock sheet, the pieces to cut and how the plan
should be presented:

    {
      "schema_version": "1.0",
      "unit": "cm",
      "sheet": {"width": 100, "height": 100},
      "pieces": [{"width": 60, "height": 40, "quantity": 1}],
      "output": {"format": "instructions"}
    }
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sheetcut.domain.value_objects import Unit

# Supported schema versions for job files
# Version 1.0: Sheet, pieces, unit and output options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class OutputFormat(str, Enum):
    """Console output formats for a cut plan."""

    INSTRUCTIONS = "instructions"
    TABLE = "table"
    JSON = "json"
    ASCII = "ascii"


class SheetConfig(BaseModel):
    """Stock sheet dimensions.

    Attributes:
        width: Sheet width in the job's unit.
        height: Sheet height in the job's unit.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, allow_inf_nan=False, description="Sheet width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Sheet height")


class PieceConfig(BaseModel):
    """A requested piece.

    Attributes:
        width: Piece width in the job's unit.
        height: Piece height in the job's unit.
        quantity: Number of identical pieces (1 to 500).
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, allow_inf_nan=False, description="Piece width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Piece height")
    quantity: int = Field(default=1, ge=1, le=500, description="Number of pieces")


class SvgOutputConfig(BaseModel):
    """Display region that each sheet diagram is scaled to fit."""

    model_config = ConfigDict(extra="forbid")

    max_width: float = Field(
        default=600.0, gt=0, allow_inf_nan=False, description="Maximum SVG width in pixels"
    )
    max_height: float = Field(
        default=400.0, gt=0, allow_inf_nan=False, description="Maximum SVG height in pixels"
    )


class OutputConfig(BaseModel):
    """Output presentation options."""

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = Field(
        default=OutputFormat.INSTRUCTIONS, description="Console output format"
    )
    svg: SvgOutputConfig = Field(default_factory=SvgOutputConfig)


class CutPlanConfiguration(BaseModel):
    """Root model of a cut plan job file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        unit: Display unit for every dimension in the file
        sheet: Stock sheet dimensions
        pieces: Requested pieces in insertion order (1 to 1000 entries)
        output: Output presentation options

    Example:
        >>> config = CutPlanConfiguration(
        ...     schema_version="1.0",
        ...     sheet=SheetConfig(width=100, height=100),
        ...     pieces=[PieceConfig(width=60, height=40)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    unit: Unit = Field(default=Unit.CM, description="Display unit")
    sheet: SheetConfig
    pieces: list[PieceConfig] = Field(..., min_length=1, max_length=1000)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Reject schema versions this release cannot read."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
