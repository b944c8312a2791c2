"""FastAPI REST API for cabinet-studio.

Usage:
    uvicorn cabinet_studio.web:app --reload
"""

from cabinet_studio.web.app import app, create_app

__all__ = ["app", "create_app"]
