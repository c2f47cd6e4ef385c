"""FastAPI REST API for sheet cut planning.

This module provides a REST API for computing cut plans, rendering sheet
diagrams and validating job files.

Usage:
    uvicorn sheetcut.web:app --reload
"""

from sheetcut.web.app import app, create_app

__all__ = ["app", "create_app"]
