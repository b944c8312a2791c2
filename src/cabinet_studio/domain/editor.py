"""Editing operations on a design.

Every edit is applied in place and immediately re-validated against the
constraints of the affected cabinet. Out-of-range values are clamped rather
than rejected; the returned :class:`EditOutcome` tells the caller whether the
edit was applied as requested, applied with an adjustment, or rejected
because the cabinet could not be brought back into a valid state.
"""

from __future__ import annotations

import copy
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .accessories import (
    Accessory,
    Divider,
    Door,
    Drawer,
    HangingRod,
    Led,
    Shelf,
    default_accessory,
)
from .constraints import clamp_drawer_height, normalize_cabinet, snap_drawer_y
from .entities import (
    Cabinet,
    CabinetProfile,
    Design,
    SplitProfile,
    TallProfile,
    new_cabinet,
)
from .exceptions import InvalidFieldError, StructuralInvariantError
from .value_objects import (
    DEFAULT_CABINET_WIDTH,
    MAX_CABINET_WIDTH,
    MAX_CEILING_HEIGHT,
    MIN_ACCESSORY_HEIGHT,
    MIN_CABINET_HEIGHT,
    MIN_CABINET_WIDTH,
    MIN_CEILING_HEIGHT,
    MIN_UPPER_HEIGHT,
    AccessoryType,
    CabinetArchetype,
    FloorFinish,
    Hinge,
    LedPlacement,
    MaterialZone,
    clamp,
)

logger = logging.getLogger(__name__)

_SPLIT_FIELDS = frozenset(
    {"lower_height", "upper_height", "upper_elevation", "has_backsplash"}
)


class EditStatus(str, Enum):
    """How an edit request was honored."""

    APPLIED = "applied"
    ADJUSTED = "adjusted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class EditOutcome:
    """Result of a single field-level edit.

    Attributes:
        status: Whether the value was applied as requested, adjusted, or
            rejected.
        field: Name of the edited field.
        requested: Value the caller asked for.
        applied: Value now held by the model.
        message: Human-readable reason for a rejection, empty otherwise.
    """

    status: EditStatus
    field: str
    requested: Any
    applied: Any
    message: str = ""

    @property
    def adjusted(self) -> bool:
        return self.status is EditStatus.ADJUSTED

    @classmethod
    def compare(cls, field: str, requested: Any, applied: Any) -> EditOutcome:
        if _same(requested, applied):
            return cls(EditStatus.APPLIED, field, requested, applied)
        return cls(EditStatus.ADJUSTED, field, requested, applied)


def _same(a: Any, b: Any) -> bool:
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return math.isclose(a, b, abs_tol=1e-9)
    return a == b


def fit_profile_to_ceiling(profile: CabinetProfile, ceiling_height: float) -> None:
    """Bring a profile within ``ceiling_height``.

    Tall cabinets are lowered to the ceiling. Split cabinets lower the upper
    unit first and shorten it only when it would otherwise sink into the base
    unit.
    """
    match profile:
        case TallProfile():
            profile.height = clamp(profile.height, MIN_CABINET_HEIGHT, ceiling_height)
        case SplitProfile():
            profile.lower_height = clamp(
                profile.lower_height, MIN_CABINET_HEIGHT, ceiling_height - MIN_UPPER_HEIGHT
            )
            profile.upper_height = max(profile.upper_height, MIN_UPPER_HEIGHT)
            profile.upper_elevation = clamp(
                profile.upper_elevation,
                profile.lower_height,
                ceiling_height - profile.upper_height,
            )
            profile.upper_height = min(
                profile.upper_height, ceiling_height - profile.upper_elevation
            )


class DesignEditor:
    """Applies user edits to a :class:`Design`, keeping it valid.

    The editor is the single writer of the design it wraps.

    Example:
        >>> editor = DesignEditor(new_design())
        >>> cabinet = editor.design.cabinets[0]
        >>> drawer = editor.add_accessory(cabinet.id, AccessoryType.DRAWER)
        >>> editor.update_accessory(cabinet.id, drawer.id, "height", 500).status
        <EditStatus.ADJUSTED: 'adjusted'>
    """

    def __init__(self, design: Design) -> None:
        self.design = design

    # ------------------------------------------------------------------
    # Design-level edits
    # ------------------------------------------------------------------

    def rename(self, name: str) -> None:
        self.design.name = name

    def set_floor(self, floor: FloorFinish | str) -> None:
        self.design.floor = FloorFinish(floor)

    def set_material(self, zone: MaterialZone | str, material_name: str) -> None:
        """Assign a material (by name) to a zone. Names are not validated."""
        self.design.materials[MaterialZone(zone)] = material_name

    def set_ceiling_height(self, value: float) -> EditOutcome:
        """Change the ceiling height, lowering cabinets that no longer fit."""
        requested = value
        applied = clamp(float(value), MIN_CEILING_HEIGHT, MAX_CEILING_HEIGHT)
        snapshot = copy.deepcopy(self.design.cabinets)
        previous = self.design.ceiling_height

        self.design.ceiling_height = applied
        try:
            for cabinet in self.design.cabinets:
                fit_profile_to_ceiling(cabinet.profile, applied)
                normalize_cabinet(cabinet, squeeze=True)
        except StructuralInvariantError as e:
            self.design.ceiling_height = previous
            self.design.cabinets = snapshot
            return EditOutcome(EditStatus.REJECTED, "ceiling_height", requested, previous, str(e))

        logger.debug(f"Ceiling height set to {applied}")
        return _with_squeezed_drawers(
            EditOutcome.compare("ceiling_height", requested, applied),
            snapshot,
            self.design.cabinets,
        )

    # ------------------------------------------------------------------
    # Cabinet lifecycle and edits
    # ------------------------------------------------------------------

    def add_cabinet(
        self,
        archetype: CabinetArchetype | str = CabinetArchetype.TALL,
        width: float = DEFAULT_CABINET_WIDTH,
    ) -> Cabinet:
        """Append a cabinet with default geometry to the right end of the row."""
        cabinet = new_cabinet(
            len(self.design.cabinets),
            CabinetArchetype(archetype),
            clamp(width, MIN_CABINET_WIDTH, MAX_CABINET_WIDTH),
        )
        fit_profile_to_ceiling(cabinet.profile, self.design.ceiling_height)
        self.design.cabinets.append(cabinet)
        logger.debug(f"Added {cabinet.archetype.value} cabinet {cabinet.id}")
        return cabinet

    def remove_cabinet(self, cabinet_id: str) -> Cabinet:
        """Remove a cabinet by id.

        Raises:
            StructuralInvariantError: If it is the only cabinet left.
            UnknownEntityError: If no cabinet has this id.
        """
        index = self.design.index_of(cabinet_id)
        if len(self.design.cabinets) <= 1:
            raise StructuralInvariantError("A design needs at least one cabinet")
        removed = self.design.cabinets.pop(index)
        logger.debug(f"Removed cabinet {cabinet_id}")
        return removed

    def rename_cabinet(self, cabinet_id: str, name: str) -> None:
        self.design.get_cabinet(cabinet_id).name = name

    def set_cabinet_width(self, cabinet_id: str, value: float) -> EditOutcome:
        cabinet = self.design.get_cabinet(cabinet_id)
        applied = clamp(float(value), MIN_CABINET_WIDTH, MAX_CABINET_WIDTH)

        def apply() -> None:
            cabinet.width = applied

        return self._edit_cabinet(cabinet, "width", value, apply, lambda: cabinet.width)

    def set_cabinet_height(self, cabinet_id: str, value: float) -> EditOutcome:
        """Set the height of a tall cabinet.

        Raises:
            InvalidFieldError: If the cabinet is not tall.
        """
        cabinet = self.design.get_cabinet(cabinet_id)
        profile = cabinet.profile
        if not isinstance(profile, TallProfile):
            raise InvalidFieldError(
                f"Cabinet {cabinet.name} is {cabinet.archetype.value}; "
                "set lower_height, upper_height or upper_elevation instead"
            )

        def apply() -> None:
            profile.height = clamp(
                float(value), MIN_CABINET_HEIGHT, self.design.ceiling_height
            )

        return self._edit_cabinet(
            cabinet, "height", value, apply, lambda: cabinet.profile.height
        )

    def set_split_dimension(self, cabinet_id: str, field: str, value: float | bool) -> EditOutcome:
        """Edit one field of a split cabinet's profile.

        Args:
            cabinet_id: Cabinet to edit.
            field: One of ``lower_height``, ``upper_height``,
                ``upper_elevation`` or ``has_backsplash``.
            value: New value.

        Raises:
            InvalidFieldError: If the cabinet is not split or the field is unknown.
        """
        cabinet = self.design.get_cabinet(cabinet_id)
        profile = cabinet.profile
        if not isinstance(profile, SplitProfile):
            raise InvalidFieldError(f"Cabinet {cabinet.name} is not a split cabinet")
        if field not in _SPLIT_FIELDS:
            raise InvalidFieldError(f"Unknown split cabinet field: {field}")
        ceiling = self.design.ceiling_height

        def apply() -> None:
            if field == "has_backsplash":
                profile.has_backsplash = bool(value)
                return
            number = float(value)
            if field == "lower_height":
                profile.lower_height = clamp(
                    number, MIN_CABINET_HEIGHT, ceiling - MIN_UPPER_HEIGHT
                )
                profile.upper_elevation = max(profile.upper_elevation, profile.lower_height)
            elif field == "upper_height":
                profile.upper_height = clamp(
                    number, MIN_UPPER_HEIGHT, ceiling - profile.upper_elevation
                )
            else:
                profile.upper_elevation = clamp(
                    number, profile.lower_height, ceiling - profile.upper_height
                )
            fit_profile_to_ceiling(profile, ceiling)

        return self._edit_cabinet(
            cabinet, field, value, apply, lambda: getattr(cabinet.profile, field)
        )

    def set_archetype(self, cabinet_id: str, archetype: CabinetArchetype | str) -> EditOutcome:
        """Switch a cabinet between the tall and split archetypes.

        Converting to tall keeps the overall height; converting to split
        starts from the default split profile.
        """
        cabinet = self.design.get_cabinet(cabinet_id)
        target = CabinetArchetype(archetype)

        def apply() -> None:
            if target is cabinet.archetype:
                return
            if target is CabinetArchetype.TALL:
                cabinet.profile = TallProfile(height=cabinet.height)
            else:
                cabinet.profile = SplitProfile()
            fit_profile_to_ceiling(cabinet.profile, self.design.ceiling_height)

        return self._edit_cabinet(cabinet, "archetype", target, apply, lambda: cabinet.archetype)

    def _edit_cabinet(
        self,
        cabinet: Cabinet,
        field: str,
        requested: Any,
        apply: Any,
        read: Any,
    ) -> EditOutcome:
        snapshot = copy.deepcopy(cabinet)
        try:
            apply()
            normalize_cabinet(cabinet, squeeze=True)
        except StructuralInvariantError as e:
            _restore(cabinet, snapshot)
            return EditOutcome(EditStatus.REJECTED, field, requested, read(), str(e))
        return _with_squeezed_drawers(
            EditOutcome.compare(field, requested, read()), [snapshot], [cabinet]
        )

    # ------------------------------------------------------------------
    # Accessory lifecycle and edits
    # ------------------------------------------------------------------

    def add_accessory(
        self, cabinet_id: str, kind: AccessoryType | str
    ) -> Accessory:
        """Add an accessory with default geometry to a cabinet.

        Drawers are placed against their siblings: a default position that
        overlaps an existing drawer is moved into free space.

        Raises:
            StructuralInvariantError: If a drawer has no free space left.
        """
        cabinet = self.design.get_cabinet(cabinet_id)
        accessory = default_accessory(AccessoryType(kind), cabinet.width, cabinet.height)
        snapshot = copy.deepcopy(cabinet)
        cabinet.accessories.append(accessory)
        try:
            normalize_cabinet(cabinet)
        except StructuralInvariantError:
            _restore(cabinet, snapshot)
            raise
        logger.debug(f"Added {accessory.kind.value} {accessory.id} to cabinet {cabinet.id}")
        return accessory

    def remove_accessory(self, cabinet_id: str, accessory_id: str) -> Accessory:
        """Remove an accessory by id.

        Raises:
            StructuralInvariantError: If removing a divider would merge two
                drawer columns that cannot share the cabinet height.
        """
        cabinet = self.design.get_cabinet(cabinet_id)
        accessory = cabinet.get_accessory(accessory_id)
        snapshot = copy.deepcopy(cabinet)
        cabinet.accessories = [a for a in cabinet.accessories if a.id != accessory_id]
        # Removing a divider merges columns whose drawers may now collide.
        if isinstance(accessory, Divider):
            try:
                normalize_cabinet(cabinet)
            except StructuralInvariantError:
                _restore(cabinet, snapshot)
                raise
        logger.debug(f"Removed {accessory.kind.value} {accessory_id}")
        return accessory

    def update_accessory(
        self, cabinet_id: str, accessory_id: str, field: str, value: Any
    ) -> EditOutcome:
        """Apply a field-level edit to an accessory.

        Args:
            cabinet_id: Owning cabinet.
            accessory_id: Accessory to edit.
            field: Field name; must exist on the accessory's variant.
            value: Requested value.

        Returns:
            The outcome of the edit.

        Raises:
            InvalidFieldError: If the variant has no such field.
        """
        cabinet = self.design.get_cabinet(cabinet_id)
        accessory = cabinet.get_accessory(accessory_id)
        if field == "id" or field not in type(accessory).field_names():
            raise InvalidFieldError(
                f"{accessory.kind.value} accessories have no field '{field}'"
            )

        snapshot = copy.deepcopy(cabinet)
        try:
            self._apply_accessory_field(cabinet, accessory, field, value)
            normalize_cabinet(cabinet)
        except StructuralInvariantError as e:
            _restore(cabinet, snapshot)
            restored = cabinet.get_accessory(accessory_id)
            return EditOutcome(
                EditStatus.REJECTED, field, value, getattr(restored, field), str(e)
            )
        return EditOutcome.compare(field, value, getattr(accessory, field))

    def _apply_accessory_field(
        self, cabinet: Cabinet, accessory: Accessory, field: str, value: Any
    ) -> None:
        # Values are converted before assignment, so a bad value leaves the
        # accessory unchanged.
        try:
            self._assign_accessory_field(cabinet, accessory, field, value)
        except InvalidFieldError:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidFieldError(f"Invalid value for {field}: {value!r}") from e

    def _assign_accessory_field(
        self, cabinet: Cabinet, accessory: Accessory, field: str, value: Any
    ) -> None:
        match accessory, field:
            case Drawer(), "y":
                accessory.y = snap_drawer_y(cabinet, accessory, _number(value))
            case Drawer(), "height":
                accessory.height = clamp_drawer_height(cabinet, accessory, _number(value))
            case _, "y":
                accessory.y = clamp(_number(value), 0.0, cabinet.height - accessory.height)
            case _, "height":
                accessory.height = clamp(
                    _number(value), MIN_ACCESSORY_HEIGHT, cabinet.height - accessory.y
                )
            case Door(), "width":
                accessory.width = None if value is None else _number(value)
            case Door(), "hinge":
                accessory.hinge = None if value is None else Hinge(value)
            case Led(), "placement":
                accessory.placement = LedPlacement(value)
            case Shelf() | Drawer() | HangingRod() | Led() | Divider(), "x":
                accessory.x = _number(value)
            case _:
                raise InvalidFieldError(
                    f"{accessory.kind.value} accessories have no field '{field}'"
                )

    # ------------------------------------------------------------------
    # Whole-design validation
    # ------------------------------------------------------------------

    def normalize(self) -> bool:
        """Bring every cabinet within the ceiling and its accessories within bounds.

        Returns:
            True if anything changed.

        Raises:
            StructuralInvariantError: If a cabinet's drawers cannot be settled.
        """
        changed = False
        ceiling = self.design.ceiling_height
        for cabinet in self.design.cabinets:
            before = copy.deepcopy(cabinet.profile)
            fit_profile_to_ceiling(cabinet.profile, ceiling)
            changed = changed or before != cabinet.profile
            changed = normalize_cabinet(cabinet) or changed
        return changed


def _number(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{value!r} is not a finite number")
    return number


def _with_squeezed_drawers(
    outcome: EditOutcome, before: list[Cabinet], after: list[Cabinet]
) -> EditOutcome:
    """Mark an outcome as adjusted when drawers had to shrink to fit."""
    heights = {d.id: d.height for cabinet in before for d in cabinet.drawers}
    shrunk = [
        d.id
        for cabinet in after
        for d in cabinet.drawers
        if d.height < heights.get(d.id, d.height) - 1e-9
    ]
    if not shrunk:
        return outcome
    return EditOutcome(
        EditStatus.ADJUSTED,
        outcome.field,
        outcome.requested,
        outcome.applied,
        f"Drawers shrunk to fit: {', '.join(shrunk)}",
    )


def _restore(cabinet: Cabinet, snapshot: Cabinet) -> None:
    cabinet.width = snapshot.width
    cabinet.profile = snapshot.profile
    cabinet.accessories = snapshot.accessories
