"""Accessory variants that can be placed inside a cabinet.

Each variant is its own dataclass carrying only the fields that make sense for
it, so a shelf can never carry a hinge and a divider never has a placement.
``Accessory`` is the union of all variants and is matched exhaustively by the
constraint resolver and the scene renderer.

Vertical coordinates are centimeters measured downward from the top of the
cabinet interior: ``y`` is the top edge and ``y + height`` the bottom edge.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, fields
from typing import ClassVar, TypeAlias

from .value_objects import (
    SINGLE_DOOR_MAX_WIDTH,
    AccessoryType,
    Hinge,
    LedPlacement,
)


def new_id() -> str:
    """Generate a unique identifier for a cabinet or accessory."""
    return uuid.uuid4().hex[:12]


@dataclass
class _AccessoryBase:
    id: str
    y: float
    height: float

    kind: ClassVar[AccessoryType]

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))


@dataclass
class Shelf(_AccessoryBase):
    """A horizontal shelf. ``height`` is the board thickness."""

    x: float = 0.0

    kind: ClassVar[AccessoryType] = AccessoryType.SHELF


@dataclass
class Drawer(_AccessoryBase):
    """A drawer front. Drawers stack without vertical overlap."""

    x: float = 0.0

    kind: ClassVar[AccessoryType] = AccessoryType.DRAWER


@dataclass
class HangingRod(_AccessoryBase):
    """A clothes rod. ``height`` is the rod thickness."""

    x: float = 0.0

    kind: ClassVar[AccessoryType] = AccessoryType.HANGING_ROD


@dataclass
class Led(_AccessoryBase):
    """An LED strip attached to one edge of its compartment."""

    x: float = 0.0
    placement: LedPlacement = LedPlacement.TOP

    kind: ClassVar[AccessoryType] = AccessoryType.LED


@dataclass
class Door(_AccessoryBase):
    """A door covering the cabinet front.

    Attributes:
        width: Explicit door width in cm, or None for the full cabinet width.
        hinge: Hinge side. Only meaningful for single doors; a narrow door
            without an explicit hinge is hinged on the left.
    """

    width: float | None = None
    hinge: Hinge | None = None

    kind: ClassVar[AccessoryType] = AccessoryType.DOOR

    @property
    def is_single(self) -> bool:
        """Whether the door renders as one hinged leaf instead of a pair."""
        return self.width is not None and self.width < SINGLE_DOOR_MAX_WIDTH

    @property
    def effective_hinge(self) -> Hinge:
        return self.hinge or Hinge.LEFT


@dataclass
class Divider(_AccessoryBase):
    """A vertical partition at ``x`` spanning its own ``y..y+height`` range."""

    x: float = 0.0

    kind: ClassVar[AccessoryType] = AccessoryType.DIVIDER


Accessory: TypeAlias = Shelf | Drawer | Door | HangingRod | Led | Divider

ACCESSORY_CLASSES: dict[AccessoryType, type[Accessory]] = {
    AccessoryType.SHELF: Shelf,
    AccessoryType.DRAWER: Drawer,
    AccessoryType.DOOR: Door,
    AccessoryType.HANGING_ROD: HangingRod,
    AccessoryType.LED: Led,
    AccessoryType.DIVIDER: Divider,
}


def default_accessory(
    kind: AccessoryType,
    cabinet_width: float,
    cabinet_height: float,
    accessory_id: str | None = None,
) -> Accessory:
    """Create an accessory with the default geometry for its variant.

    Args:
        kind: Variant to create.
        cabinet_width: Width of the target cabinet in cm.
        cabinet_height: Accessory coordinate height of the target cabinet.
        accessory_id: Identifier to use; generated when omitted.

    Returns:
        A new accessory instance. Drawer placement against siblings is left to
        the constraint resolver.
    """
    acc_id = accessory_id or new_id()
    match kind:
        case AccessoryType.SHELF:
            return Shelf(id=acc_id, y=cabinet_height / 2, height=2.0)
        case AccessoryType.DRAWER:
            return Drawer(id=acc_id, y=cabinet_height * 0.6, height=20.0)
        case AccessoryType.DOOR:
            return Door(id=acc_id, y=0.0, height=cabinet_height)
        case AccessoryType.HANGING_ROD:
            return HangingRod(id=acc_id, y=cabinet_height * 0.4, height=4.0)
        case AccessoryType.LED:
            return Led(id=acc_id, y=10.0, height=2.0)
        case AccessoryType.DIVIDER:
            return Divider(
                id=acc_id, y=0.0, height=cabinet_height, x=cabinet_width / 2
            )
    raise ValueError(f"Unsupported accessory type: {kind}")
