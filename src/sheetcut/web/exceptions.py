"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sheetcut.application.config import ConfigError
from sheetcut.domain import CutPlanError


class CutPlanFailedError(Exception):
    """Raised when the planning command returns errors instead of cuts."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Cut planning failed: {errors}")


class SheetNotFoundError(Exception):
    """Raised when a diagram is requested for a sheet the plan does not use."""

    def __init__(self, sheet_index: int, total_sheets: int) -> None:
        self.sheet_index = sheet_index
        self.total_sheets = total_sheets
        super().__init__(
            f"Sheet {sheet_index} not found; plan uses {total_sheets} sheet(s)"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Rejected inputs may be NaN or infinity, which JSON cannot carry
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid request",
                "error_type": "validation",
                "details": [
                    {
                        "path": ".".join(str(part) for part in err["loc"]),
                        "message": err["msg"],
                    }
                    for err in exc.errors()
                ],
            },
        )

    @app.exception_handler(CutPlanFailedError)
    async def plan_failed_handler(
        request: Request, exc: CutPlanFailedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cut planning failed",
                "error_type": "planning",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(CutPlanError)
    async def cut_plan_error_handler(
        request: Request, exc: CutPlanError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": None,
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        request: Request, exc: ConfigError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid job description",
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(SheetNotFoundError)
    async def sheet_not_found_handler(
        request: Request, exc: SheetNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {
                    "sheet": exc.sheet_index,
                    "total_sheets": exc.total_sheets,
                },
            },
        )
