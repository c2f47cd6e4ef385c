"""API routers for the REST API."""

from sheetcut.web.routers.plan import router as plan_router
from sheetcut.web.routers.validate import router as validate_router

__all__ = ["plan_router", "validate_router"]
