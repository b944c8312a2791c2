"""API routers for the REST API."""

from cabinet_studio.web.routers.designs import router as designs_router
from cabinet_studio.web.routers.export import router as export_router
from cabinet_studio.web.routers.library import router as library_router

__all__ = [
    "designs_router",
    "export_router",
    "library_router",
]
