"""Application settings loaded from a JSON file."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from cabinet_studio.application.document.loader import (
    extract_validation_errors,
    format_validation_message,
)
from cabinet_studio.domain.exceptions import CabinetStudioError
from cabinet_studio.domain.geometry import ScaleConfig
from cabinet_studio.domain.value_objects import (
    AspectRatio,
    DoorState,
    EnvironmentSettings,
    FloorFinish,
    LightTemperature,
)


class ConfigError(CabinetStudioError):
    """Exception raised for settings file errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, file_read_error,
            json_parse, validation)
        path: Path to the settings file (if applicable)
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class DrawingSettings(BaseModel):
    """Scale and paddings of the drawing surface, in pixels."""

    model_config = ConfigDict(extra="forbid")

    scale: float = Field(default=3.0, gt=0, description="Pixels per centimeter")
    padding_left: float = Field(default=70.0, ge=0)
    padding_right: float = Field(default=40.0, ge=0)
    padding_top: float = Field(default=40.0, ge=0)
    padding_bottom: float = Field(default=20.0, ge=0)
    ceiling_band: float = Field(default=24.0, ge=0)
    floor_band: float = Field(default=24.0, ge=0)
    dimension_band: float = Field(default=36.0, ge=0)
    cabinet_gap: float = Field(default=12.0, ge=0, description="0 lays cabinets out abutting")


class RenderDefaults(BaseModel):
    """Defaults for requests to the rendering service."""

    model_config = ConfigDict(extra="forbid")

    light_temperature: LightTemperature = LightTemperature.NATURAL
    door_state: DoorState = DoorState.CLOSED
    aspect_ratio: AspectRatio = AspectRatio.WIDE
    jpeg_quality: int = Field(default=90, ge=1, le=95)


class StudioSettings(BaseModel):
    """Root settings model.

    Attributes:
        drawing: Drawing surface configuration.
        render: Rendering service defaults.
        storage_dir: Directory of the JSON design repository.
        texture_dir: Directory scanned by the material catalog.
        vendor_specs: Vendor specification pairs added to every prompt.
    """

    model_config = ConfigDict(extra="forbid")

    drawing: DrawingSettings = Field(default_factory=DrawingSettings)
    render: RenderDefaults = Field(default_factory=RenderDefaults)
    storage_dir: Path = Path("designs")
    texture_dir: Path = Path("textures")
    vendor_specs: dict[str, str] = Field(default_factory=dict)

    def scale_config(self) -> ScaleConfig:
        return ScaleConfig(**self.drawing.model_dump())

    def environment(self, floor: FloorFinish = FloorFinish.WOOD_LIGHT) -> EnvironmentSettings:
        return EnvironmentSettings(
            floor=floor,
            light_temperature=self.render.light_temperature,
            door_state=self.render.door_state,
            aspect_ratio=self.render.aspect_ratio,
        )


def load_settings_from_dict(data: dict[str, Any], path: Path | None = None) -> StudioSettings:
    """Validate settings from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return StudioSettings.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_message("Settings validation failed:", details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_settings(path: Path | None = None) -> StudioSettings:
    """Load settings from a JSON file, or defaults when ``path`` is None.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON or invalid.
    """
    if path is None:
        return StudioSettings()
    if not path.exists():
        raise ConfigError(
            message=f"Settings file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading settings file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in settings file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Settings file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )
    return load_settings_from_dict(data, path)
