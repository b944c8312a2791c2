"""Value objects and enums for the cabinet design domain.

All lengths are centimeters. Enums derive from ``(str, Enum)`` so their values
serialize directly into design documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Design bounds (cm)
MIN_CEILING_HEIGHT = 200.0
MAX_CEILING_HEIGHT = 300.0
DEFAULT_CEILING_HEIGHT = 240.0

MIN_CABINET_WIDTH = 30.0
MAX_CABINET_WIDTH = 120.0
DEFAULT_CABINET_WIDTH = 60.0

MIN_CABINET_HEIGHT = 30.0
DEFAULT_TALL_HEIGHT = 220.0

MIN_UPPER_HEIGHT = 20.0
DEFAULT_LOWER_HEIGHT = 85.0
DEFAULT_UPPER_HEIGHT = 70.0
DEFAULT_UPPER_ELEVATION = 145.0

MIN_ACCESSORY_HEIGHT = 1.0
MIN_DOOR_WIDTH = 10.0

# Doors narrower than this are rendered as a single hinged leaf.
SINGLE_DOOR_MAX_WIDTH = 30.0


class CabinetArchetype(str, Enum):
    """Height profile of a cabinet."""

    TALL = "tall"
    SPLIT = "split"


class AccessoryType(str, Enum):
    """Discriminator for the accessory variants.

    Declaration order is the order used when accessories are counted or listed.
    """

    DRAWER = "drawer"
    SHELF = "shelf"
    DOOR = "door"
    HANGING_ROD = "hanging-rod"
    LED = "led"
    DIVIDER = "divider"


class Hinge(str, Enum):
    """Hinge side of a single door."""

    LEFT = "left"
    RIGHT = "right"


class LedPlacement(str, Enum):
    """Edge an LED strip is attached to."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class FloorFinish(str, Enum):
    """Floor finish shown in the floor band and sent to the renderer."""

    POLISHED = "polished"
    WOOD_LIGHT = "wood-light"
    WOOD_DARK = "wood-dark"

    @property
    def label(self) -> str:
        return _FLOOR_LABELS[self]


_FLOOR_LABELS: dict[FloorFinish, str] = {
    FloorFinish.POLISHED: "polished tile floor",
    FloorFinish.WOOD_LIGHT: "light wood floor",
    FloorFinish.WOOD_DARK: "dark wood floor",
}


class MaterialZone(str, Enum):
    """Zones a material can be assigned to."""

    EXTERIOR = "exterior"
    INTERIOR = "interior"
    DOOR = "door"
    DRAWER = "drawer"


class LightTemperature(str, Enum):
    """Color temperature of the ceiling spot lights."""

    WARM = "3000K"
    NATURAL = "4000K"
    COOL = "6000K"

    @property
    def label(self) -> str:
        return _LIGHT_LABELS[self]


_LIGHT_LABELS: dict[LightTemperature, str] = {
    LightTemperature.WARM: "warm white (3000K)",
    LightTemperature.NATURAL: "natural white (4000K)",
    LightTemperature.COOL: "cool white (6000K)",
}


class DoorState(str, Enum):
    """Whether doors are shown open or closed in the rendering."""

    CLOSED = "closed"
    OPEN = "open"


class AspectRatio(str, Enum):
    """Output aspect ratio requested from the rendering service."""

    SQUARE = "1:1"
    LANDSCAPE = "4:3"
    PORTRAIT = "3:4"
    WIDE = "16:9"
    TALL = "9:16"


@dataclass(frozen=True)
class Span:
    """Closed horizontal interval within a cabinet, in cm from its left edge."""

    left: float
    right: float

    def __post_init__(self) -> None:
        if self.right < self.left:
            raise ValueError("Span right edge must not be left of its left edge")

    @property
    def width(self) -> float:
        return self.right - self.left

    def overlaps(self, other: Span, tolerance: float = 0.0) -> bool:
        """Check whether the spans share a stretch longer than ``tolerance``."""
        return (
            min(self.right, other.right) - max(self.left, other.left) > tolerance
        )


@dataclass(frozen=True)
class EnvironmentSettings:
    """Scene settings handed to the rendering service with the drawing."""

    floor: FloorFinish = FloorFinish.WOOD_LIGHT
    light_temperature: LightTemperature = LightTemperature.NATURAL
    door_state: DoorState = DoorState.CLOSED
    aspect_ratio: AspectRatio = AspectRatio.WIDE


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``.

    When the range is empty (``high < low``) ``low`` wins.
    """
    return max(low, min(value, high))
