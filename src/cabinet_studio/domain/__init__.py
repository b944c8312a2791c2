"""Domain layer - cabinet model, geometry and constraints."""

from .accessories import (
    Accessory,
    Divider,
    Door,
    Drawer,
    HangingRod,
    Led,
    Shelf,
    default_accessory,
    new_id,
)
from .constraints import (
    clamp_accessory,
    clamp_drawer_height,
    normalize_cabinet,
    resolve_span,
    settle_drawers,
    snap_drawer_y,
    stack_neighbors,
)
from .editor import DesignEditor, EditOutcome, EditStatus
from .entities import (
    Cabinet,
    Design,
    SplitProfile,
    TallProfile,
    new_cabinet,
    new_design,
)
from .exceptions import (
    CabinetStudioError,
    InvalidFieldError,
    StructuralInvariantError,
    UnknownEntityError,
)
from .geometry import ScaleConfig, cabinet_at, surface_size, to_pixels
from .value_objects import (
    AccessoryType,
    AspectRatio,
    CabinetArchetype,
    DoorState,
    EnvironmentSettings,
    FloorFinish,
    Hinge,
    LedPlacement,
    LightTemperature,
    MaterialZone,
    Span,
)

__all__ = [
    # Entities
    "Cabinet",
    "Design",
    "SplitProfile",
    "TallProfile",
    "new_cabinet",
    "new_design",
    # Accessories
    "Accessory",
    "Divider",
    "Door",
    "Drawer",
    "HangingRod",
    "Led",
    "Shelf",
    "default_accessory",
    "new_id",
    # Constraints
    "clamp_accessory",
    "clamp_drawer_height",
    "normalize_cabinet",
    "resolve_span",
    "settle_drawers",
    "snap_drawer_y",
    "stack_neighbors",
    # Editing
    "DesignEditor",
    "EditOutcome",
    "EditStatus",
    # Geometry
    "ScaleConfig",
    "cabinet_at",
    "surface_size",
    "to_pixels",
    # Errors
    "CabinetStudioError",
    "InvalidFieldError",
    "StructuralInvariantError",
    "UnknownEntityError",
    # Value objects
    "AccessoryType",
    "AspectRatio",
    "CabinetArchetype",
    "DoorState",
    "EnvironmentSettings",
    "FloorFinish",
    "Hinge",
    "LedPlacement",
    "LightTemperature",
    "MaterialZone",
    "Span",
]
