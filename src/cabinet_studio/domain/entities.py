"""Domain entities: the design aggregate, its cabinets and their profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from .accessories import Accessory, Divider, Drawer, new_id
from .exceptions import UnknownEntityError
from .value_objects import (
    DEFAULT_CABINET_WIDTH,
    DEFAULT_CEILING_HEIGHT,
    DEFAULT_LOWER_HEIGHT,
    DEFAULT_TALL_HEIGHT,
    DEFAULT_UPPER_ELEVATION,
    DEFAULT_UPPER_HEIGHT,
    CabinetArchetype,
    FloorFinish,
    MaterialZone,
)


@dataclass
class TallProfile:
    """A single full-height carcass standing on the floor."""

    height: float = DEFAULT_TALL_HEIGHT

    archetype = CabinetArchetype.TALL

    @property
    def total_height(self) -> float:
        return self.height


@dataclass
class SplitProfile:
    """A base unit plus a wall-mounted upper unit with a gap between them.

    Attributes:
        lower_height: Height of the base unit in cm.
        upper_height: Height of the upper unit in cm.
        upper_elevation: Distance from the floor to the bottom of the upper
            unit. Never below ``lower_height``.
        has_backsplash: Whether the gap between the units is drawn as a
            backsplash band.
    """

    lower_height: float = DEFAULT_LOWER_HEIGHT
    upper_height: float = DEFAULT_UPPER_HEIGHT
    upper_elevation: float = DEFAULT_UPPER_ELEVATION
    has_backsplash: bool = True

    archetype = CabinetArchetype.SPLIT

    @property
    def total_height(self) -> float:
        return self.upper_elevation + self.upper_height

    @property
    def gap(self) -> float:
        """Height of the backsplash zone between the two units."""
        return self.upper_elevation - self.lower_height


CabinetProfile: TypeAlias = TallProfile | SplitProfile


@dataclass
class Cabinet:
    """One modular storage unit in the row.

    Attributes:
        id: Stable identifier.
        name: Display name.
        width: Width in cm.
        profile: Archetype-specific height profile.
        accessories: Accessories owned by this cabinet. Order carries no
            meaning beyond insertion order.
    """

    id: str
    name: str
    width: float = DEFAULT_CABINET_WIDTH
    profile: CabinetProfile = field(default_factory=TallProfile)
    accessories: list[Accessory] = field(default_factory=list)

    @property
    def archetype(self) -> CabinetArchetype:
        return self.profile.archetype

    @property
    def height(self) -> float:
        """Height of the accessory coordinate space in cm."""
        return self.profile.total_height

    def get_accessory(self, accessory_id: str) -> Accessory:
        for accessory in self.accessories:
            if accessory.id == accessory_id:
                return accessory
        raise UnknownEntityError("accessory", accessory_id)

    @property
    def dividers(self) -> list[Divider]:
        return [a for a in self.accessories if isinstance(a, Divider)]

    @property
    def drawers(self) -> list[Drawer]:
        return [a for a in self.accessories if isinstance(a, Drawer)]


def default_materials() -> dict[MaterialZone, str]:
    return {zone: "" for zone in MaterialZone}


@dataclass
class Design:
    """Root aggregate: a row of cabinets under a ceiling.

    Attributes:
        name: Display name of the design.
        ceiling_height: Ceiling height in cm.
        floor: Floor finish.
        materials: Material name per zone; an empty string means unassigned.
        cabinets: Cabinets from left to right. Never empty once built through
            :func:`new_design` or the document loader.
    """

    name: str = "Untitled design"
    ceiling_height: float = DEFAULT_CEILING_HEIGHT
    floor: FloorFinish = FloorFinish.WOOD_LIGHT
    materials: dict[MaterialZone, str] = field(default_factory=default_materials)
    cabinets: list[Cabinet] = field(default_factory=list)

    @property
    def total_width(self) -> float:
        """Sum of all cabinet widths in cm."""
        return sum(cabinet.width for cabinet in self.cabinets)

    def get_cabinet(self, cabinet_id: str) -> Cabinet:
        for cabinet in self.cabinets:
            if cabinet.id == cabinet_id:
                return cabinet
        raise UnknownEntityError("cabinet", cabinet_id)

    def index_of(self, cabinet_id: str) -> int:
        for index, cabinet in enumerate(self.cabinets):
            if cabinet.id == cabinet_id:
                return index
        raise UnknownEntityError("cabinet", cabinet_id)


def new_cabinet(
    index: int,
    archetype: CabinetArchetype = CabinetArchetype.TALL,
    width: float = DEFAULT_CABINET_WIDTH,
) -> Cabinet:
    """Create a cabinet with default geometry.

    Args:
        index: Zero-based position in the row, used for the default name.
        archetype: Height profile to use.
        width: Width in cm.
    """
    profile: CabinetProfile
    if archetype is CabinetArchetype.SPLIT:
        profile = SplitProfile()
    else:
        profile = TallProfile()
    return Cabinet(id=new_id(), name=f"Cabinet #{index + 1}", width=width, profile=profile)


def new_design(name: str = "Untitled design", cabinet_count: int = 1) -> Design:
    """Create a design holding ``cabinet_count`` default tall cabinets."""
    count = max(1, cabinet_count)
    return Design(name=name, cabinets=[new_cabinet(i) for i in range(count)])
