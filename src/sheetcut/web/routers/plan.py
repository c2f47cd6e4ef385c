"""Cut planning endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, Response

from sheetcut.application.commands import CalculateCutsCommand
from sheetcut.application.dtos import CutPlanOutput, PieceInput, SheetInput
from sheetcut.infrastructure import CutDiagramRenderer, JsonExporter
from sheetcut.web.dependencies import CalculateCommandDep
from sheetcut.web.exceptions import CutPlanFailedError, SheetNotFoundError
from sheetcut.web.schemas.requests import PlanRequest
from sheetcut.web.schemas.responses import ErrorResponseSchema, PlanResponseSchema

router = APIRouter(prefix="/plan", tags=["plan"])


def _run_plan(request: PlanRequest, command: CalculateCutsCommand) -> CutPlanOutput:
    """Execute the planning command, raising CutPlanFailedError on errors."""
    output = command.execute(
        SheetInput(width=request.sheet.width, height=request.sheet.height),
        [
            PieceInput(width=p.width, height=p.height, quantity=p.quantity)
            for p in request.pieces
        ],
        request.unit,
    )
    if not output.is_valid:
        raise CutPlanFailedError(output.errors)
    return output


@router.post(
    "",
    response_model=PlanResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def create_plan(
    request: PlanRequest,
    command: CalculateCommandDep,
) -> PlanResponseSchema:
    """Compute a cut plan.

    Args:
        request: Sheet, pieces and display unit.
        command: Injected planning command.

    Returns:
        Cuts, per-sheet usage, instructions and totals.
    """
    output = _run_plan(request, command)
    return PlanResponseSchema.model_validate(JsonExporter().to_dict(output))


@router.post(
    "/svg",
    responses={
        200: {"content": {"image/svg+xml": {}}},
        404: {"model": ErrorResponseSchema},
        422: {"model": ErrorResponseSchema},
    },
)
async def plan_svg(
    request: PlanRequest,
    command: CalculateCommandDep,
    sheet: Annotated[int, Query(ge=0, description="0-based sheet index")] = 0,
) -> Response:
    """Compute a cut plan and return the diagram of one sheet as SVG."""
    output = _run_plan(request, command)
    try:
        layout = output.result.layout_for(sheet)
    except KeyError:
        raise SheetNotFoundError(sheet, output.result.total_sheets) from None

    svg_content = CutDiagramRenderer().render_svg(layout, output.result.total_sheets)
    return Response(
        content=svg_content,
        media_type="image/svg+xml",
        headers={"Content-Disposition": f"inline; filename=sheet_{sheet + 1}.svg"},
    )
