"""Design rendering, validation, prompt and edit endpoints.

The API is stateless: every request carries the full design document and
edits answer with the resulting document.
"""

from typing import Any

from fastapi import APIRouter, Query
from fastapi.responses import Response

from cabinet_studio.application.document import export_design, import_design
from cabinet_studio.application.prompt_compiler import compile_prompt, count_accessories
from cabinet_studio.domain.editor import DesignEditor, EditOutcome
from cabinet_studio.domain.value_objects import EnvironmentSettings
from cabinet_studio.web.dependencies import ServiceFactoryDep
from cabinet_studio.web.exceptions import UnsupportedFormatError
from cabinet_studio.web.schemas import (
    AddAccessoryRequest,
    CabinetSummarySchema,
    DesignRequest,
    EditOutcomeSchema,
    EditResponse,
    PromptRequest,
    PromptResponse,
    RemoveCabinetRequest,
    UpdateAccessoryRequest,
    ValidationResponse,
)

router = APIRouter(prefix="/designs", tags=["designs"])


def _outcome_schema(outcome: EditOutcome) -> EditOutcomeSchema:
    def plain(value: Any) -> Any:
        return getattr(value, "value", value)

    return EditOutcomeSchema(
        status=outcome.status.value,
        field=outcome.field,
        requested=plain(outcome.requested),
        applied=plain(outcome.applied),
        message=outcome.message,
    )


@router.post("/render")
async def render_design(
    request: DesignRequest,
    factory: ServiceFactoryDep,
    format: str = Query(default="svg", description="svg, png, jpeg or json"),
) -> Response:
    """Render a design document in the requested format."""
    available = factory.available_formats()
    if format not in available:
        raise UnsupportedFormatError(format, available)

    design = import_design(request.design)
    exporter = factory.create_exporter(format)
    return Response(
        content=exporter.export_bytes(design),
        media_type=exporter.mime_type,
        headers={
            "Content-Disposition": f'inline; filename="design.{exporter.file_extension}"'
        },
    )


@router.post("/validate", response_model=ValidationResponse)
async def validate_design(request: DesignRequest) -> ValidationResponse:
    """Validate, migrate and normalize a design document."""
    design = import_design(request.design)
    return ValidationResponse(
        name=design.name,
        total_width=design.total_width,
        cabinets=[
            CabinetSummarySchema(
                id=cabinet.id,
                name=cabinet.name,
                archetype=cabinet.archetype.value,
                width=cabinet.width,
                height=cabinet.height,
                accessories=count_accessories(cabinet),
            )
            for cabinet in design.cabinets
        ],
        design=export_design(design),
    )


@router.post("/prompt", response_model=PromptResponse)
async def design_prompt(request: PromptRequest, factory: ServiceFactoryDep) -> PromptResponse:
    """Compile the rendering prompt for a design."""
    design = import_design(request.design)
    env = request.environment
    defaults = factory.environment(env.floor or design.floor)
    environment = EnvironmentSettings(
        floor=defaults.floor,
        light_temperature=env.light_temperature or defaults.light_temperature,
        door_state=env.door_state or defaults.door_state,
        aspect_ratio=env.aspect_ratio or defaults.aspect_ratio,
    )
    vendor_specs = {**factory.settings.vendor_specs, **request.vendor_specs}
    return PromptResponse(prompt=compile_prompt(design, vendor_specs, environment))


@router.post("/accessories", response_model=EditResponse)
async def add_accessory(request: AddAccessoryRequest) -> EditResponse:
    """Add an accessory with default geometry to a cabinet."""
    design = import_design(request.design)
    accessory = DesignEditor(design).add_accessory(request.cabinet_id, request.type)
    return EditResponse(design=export_design(design), created_id=accessory.id)


@router.post("/accessories/update", response_model=EditResponse)
async def update_accessory(request: UpdateAccessoryRequest) -> EditResponse:
    """Apply a field-level edit to an accessory."""
    design = import_design(request.design)
    outcome = DesignEditor(design).update_accessory(
        request.cabinet_id, request.accessory_id, request.field, request.value
    )
    return EditResponse(design=export_design(design), outcome=_outcome_schema(outcome))


@router.post("/cabinets/remove", response_model=EditResponse)
async def remove_cabinet(request: RemoveCabinetRequest) -> EditResponse:
    """Remove a cabinet. The last cabinet cannot be removed."""
    design = import_design(request.design)
    DesignEditor(design).remove_cabinet(request.cabinet_id)
    return EditResponse(design=export_design(design))
