"""Export format endpoints."""

from fastapi import APIRouter

from cabinet_studio.web.dependencies import ServiceFactoryDep
from cabinet_studio.web.schemas import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats(factory: ServiceFactoryDep) -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=factory.available_formats())
