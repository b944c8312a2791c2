"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cabinet_studio.domain.value_objects import (
    AccessoryType,
    AspectRatio,
    DoorState,
    FloorFinish,
    LightTemperature,
)


class DesignRequest(BaseModel):
    """Request carrying a design document."""

    design: dict[str, Any] = Field(..., description="Design document JSON")


class EnvironmentSchema(BaseModel):
    """Scene settings for the rendering prompt. Omitted fields use defaults."""

    floor: FloorFinish | None = Field(
        default=None, description="Floor finish (default: the design's floor)"
    )
    light_temperature: LightTemperature | None = None
    door_state: DoorState | None = None
    aspect_ratio: AspectRatio | None = None


class PromptRequest(DesignRequest):
    """Request for compiling a rendering prompt."""

    vendor_specs: dict[str, str] = Field(
        default_factory=dict, description="Vendor specifications; 'notes' is appended verbatim"
    )
    environment: EnvironmentSchema = Field(default_factory=EnvironmentSchema)


class AddAccessoryRequest(DesignRequest):
    """Request for adding an accessory with default geometry."""

    cabinet_id: str = Field(..., description="Target cabinet id")
    type: AccessoryType = Field(..., description="Accessory type")


class UpdateAccessoryRequest(DesignRequest):
    """Request for a field-level accessory edit."""

    cabinet_id: str
    accessory_id: str
    field: str = Field(..., description="Accessory field, e.g. 'y' or 'height'")
    value: Any = Field(..., description="Requested value")


class RemoveCabinetRequest(DesignRequest):
    """Request for removing a cabinet."""

    cabinet_id: str
