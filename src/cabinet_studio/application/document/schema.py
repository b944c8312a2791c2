"""Pydantic models for the design document format.

A design document is the JSON snapshot written on export and read on import.
Cabinets are tagged by ``archetype`` and accessories by ``type``; each variant
model only accepts the fields of its own variant.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cabinet_studio.domain.value_objects import (
    DEFAULT_CABINET_WIDTH,
    DEFAULT_CEILING_HEIGHT,
    DEFAULT_LOWER_HEIGHT,
    DEFAULT_TALL_HEIGHT,
    DEFAULT_UPPER_ELEVATION,
    DEFAULT_UPPER_HEIGHT,
    FloorFinish,
    Hinge,
    LedPlacement,
    MaterialZone,
)

# Version 1.0: tall and split cabinets, typed accessories, door hinges
FORMAT_VERSION = "1.0"
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class _DocumentModel(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)


# =============================================================================
# Accessories
# =============================================================================


class _AccessoryModel(_DocumentModel):
    id: str | None = Field(default=None, min_length=1)
    y: float = Field(..., description="Top edge in cm below the top of the interior")
    height: float = Field(..., gt=0)


class ShelfModel(_AccessoryModel):
    type: Literal["shelf"]
    x: float = 0.0


class DrawerModel(_AccessoryModel):
    type: Literal["drawer"]
    x: float = 0.0


class HangingRodModel(_AccessoryModel):
    type: Literal["hanging-rod"]
    x: float = 0.0


class LedModel(_AccessoryModel):
    type: Literal["led"]
    x: float = 0.0
    placement: LedPlacement = LedPlacement.TOP


class DoorModel(_AccessoryModel):
    type: Literal["door"]
    width: float | None = Field(default=None, gt=0)
    hinge: Hinge | None = None


class DividerModel(_AccessoryModel):
    type: Literal["divider"]
    x: float = 0.0


AnyAccessoryModel = Union[
    ShelfModel, DrawerModel, HangingRodModel, LedModel, DoorModel, DividerModel
]

AccessoryModel = Annotated[
    AnyAccessoryModel,
    Field(discriminator="type"),
]


# =============================================================================
# Cabinets
# =============================================================================


class _CabinetModel(_DocumentModel):
    id: str | None = Field(default=None, min_length=1)
    name: str = ""
    width: float = Field(default=DEFAULT_CABINET_WIDTH, gt=0)
    accessories: list[AccessoryModel] = Field(default_factory=list)


class TallCabinetModel(_CabinetModel):
    archetype: Literal["tall"]
    height: float = Field(default=DEFAULT_TALL_HEIGHT, gt=0)


class SplitCabinetModel(_CabinetModel):
    archetype: Literal["split"]
    lower_height: float = Field(default=DEFAULT_LOWER_HEIGHT, gt=0)
    upper_height: float = Field(default=DEFAULT_UPPER_HEIGHT, gt=0)
    upper_elevation: float = Field(default=DEFAULT_UPPER_ELEVATION, gt=0)
    has_backsplash: bool = True


CabinetModel = Annotated[
    Union[TallCabinetModel, SplitCabinetModel],
    Field(discriminator="archetype"),
]


# =============================================================================
# Document root
# =============================================================================


class DesignDocument(_DocumentModel):
    """Root of a design document.

    Attributes:
        format_version: Document format version.
        name: Display name of the design.
        ceiling_height: Ceiling height in cm.
        floor: Floor finish.
        materials: Material name per zone. Missing zones are unassigned.
        cabinets: Cabinets from left to right; at least one.
    """

    format_version: str = FORMAT_VERSION
    name: str = "Untitled design"
    ceiling_height: float = Field(default=DEFAULT_CEILING_HEIGHT, gt=0)
    floor: FloorFinish = FloorFinish.WOOD_LIGHT
    materials: dict[MaterialZone, str] = Field(default_factory=dict)
    cabinets: list[CabinetModel] = Field(..., min_length=1)

    @field_validator("format_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported format version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "DesignDocument":
        seen: set[str] = set()
        for cabinet in self.cabinets:
            ids = [cabinet.id] + [a.id for a in cabinet.accessories]
            for entity_id in ids:
                if entity_id is None:
                    continue
                if entity_id in seen:
                    raise ValueError(f"Duplicate id '{entity_id}'")
                seen.add(entity_id)
        return self
