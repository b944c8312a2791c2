"""Spatial constraints between accessories of one cabinet.

This module resolves the horizontal span an accessory may occupy given the
dividers around it, and keeps drawers from overlapping when they are moved,
resized or when the cabinet around them changes.

Nothing here raises for out-of-range input; values are clamped into range.
The only exception is :func:`settle_drawers`, which reports a drawer that
has no free space left in its column.
"""

from __future__ import annotations

import logging

from .accessories import Accessory, Divider, Door, Drawer, Led, Shelf, HangingRod
from .entities import Cabinet
from .exceptions import StructuralInvariantError
from .value_objects import MIN_ACCESSORY_HEIGHT, MIN_DOOR_WIDTH, Span, clamp

logger = logging.getLogger(__name__)

# Vertical ranges closer than this count as touching, hence overlapping,
# when deciding which dividers bound an accessory.
RANGE_TOLERANCE = 0.01

# Edge distance within which a neighbor counts as lying beyond the moving
# drawer's old edge.
SNAP_TOLERANCE = 0.5

# Minimum shared length for two spans or two vertical ranges to overlap.
_EPSILON = 1e-6


def _ranges_touch(top_a: float, bottom_a: float, top_b: float, bottom_b: float) -> bool:
    return top_a <= bottom_b + RANGE_TOLERANCE and top_b <= bottom_a + RANGE_TOLERANCE


def _ranges_overlap(top_a: float, bottom_a: float, top_b: float, bottom_b: float) -> bool:
    return min(bottom_a, bottom_b) - max(top_a, top_b) > _EPSILON


def resolve_span_at(
    cabinet: Cabinet, x: float, y: float, height: float
) -> Span:
    """Resolve the usable span for geometry at anchor ``x`` and range ``y..y+height``.

    Starts from the full cabinet width and narrows it to the nearest divider
    on each side whose vertical range touches ``[y, y + height]``. A divider at
    or left of ``x`` bounds the left side, one strictly right of ``x`` bounds
    the right side.
    """
    left = 0.0
    right = cabinet.width
    bottom = y + height
    for divider in cabinet.dividers:
        if not _ranges_touch(y, bottom, divider.y, divider.bottom):
            continue
        if divider.x <= x:
            left = max(left, divider.x)
        else:
            right = min(right, divider.x)
    return Span(left, max(left, right))


def resolve_span(cabinet: Cabinet, accessory: Accessory) -> Span:
    """Resolve the horizontal span an accessory renders and operates within.

    Doors and dividers always span the full cabinet width. Shelves, drawers,
    hanging rods and LED strips see only the nearest divider on each side at
    their own vertical range.

    Args:
        cabinet: Cabinet owning the accessory.
        accessory: Accessory to resolve.

    Returns:
        The resolved span in cm from the cabinet's left edge.
    """
    match accessory:
        case Door() | Divider():
            return Span(0.0, cabinet.width)
        case Shelf() | Drawer() | HangingRod() | Led():
            return resolve_span_at(cabinet, accessory.x, accessory.y, accessory.height)
    raise TypeError(f"Unsupported accessory: {accessory!r}")


def _blocking_drawers(
    cabinet: Cabinet, drawer: Drawer, y: float, height: float
) -> list[Drawer]:
    """Sibling drawers that would overlap ``drawer`` placed at ``y``/``height``."""
    span = resolve_span_at(cabinet, drawer.x, y, height)
    blocking: list[Drawer] = []
    for other in cabinet.drawers:
        if other.id == drawer.id:
            continue
        if not span.overlaps(resolve_span(cabinet, other), _EPSILON):
            continue
        if _ranges_overlap(y, y + height, other.y, other.bottom):
            blocking.append(other)
    return blocking


def stack_neighbors(cabinet: Cabinet, drawer: Drawer) -> list[Drawer]:
    """Sibling drawers whose resolved span overlaps the drawer's span."""
    span = resolve_span(cabinet, drawer)
    return [
        other
        for other in cabinet.drawers
        if other.id != drawer.id
        and span.overlaps(resolve_span(cabinet, other), _EPSILON)
    ]


def snap_drawer_y(cabinet: Cabinet, drawer: Drawer, requested_y: float) -> float:
    """Compute where a drawer lands when the user moves it to ``requested_y``.

    Moving down onto a neighbor that lies below the drawer's old bottom edge
    snaps the drawer to rest on top of that neighbor; moving up snaps it to
    hang below the nearest neighbor above. A request that clears a neighbor
    entirely is honored, so dragging far enough jumps past it. The result is
    clamped into the cabinet. If it would still overlap a sibling the drawer
    keeps its current position.

    Returns:
        The new ``y`` for the drawer. The drawer itself is not modified.
    """
    old_y = drawer.y
    height = drawer.height
    neighbors = stack_neighbors(cabinet, drawer)
    y = requested_y

    # Each pass snaps against one neighbor; the snapped position may in turn
    # hit a closer neighbor.
    for _ in range(len(neighbors) + 1):
        if y > old_y:
            hits = [
                n
                for n in neighbors
                if n.y >= drawer.bottom - SNAP_TOLERANCE
                and _ranges_overlap(y, y + height, n.y, n.bottom)
            ]
            if not hits:
                break
            y = min(hits, key=lambda n: n.y).y - height
        elif y < old_y:
            hits = [
                n
                for n in neighbors
                if n.bottom <= old_y + SNAP_TOLERANCE
                and _ranges_overlap(y, y + height, n.y, n.bottom)
            ]
            if not hits:
                break
            y = max(hits, key=lambda n: n.bottom).bottom
        else:
            break

    y = clamp(y, 0.0, cabinet.height - height)
    if _blocking_drawers(cabinet, drawer, y, height):
        logger.debug(f"Drawer {drawer.id} blocked at y={y:.2f}, keeping y={old_y:.2f}")
        return old_y
    if y != requested_y:
        logger.debug(f"Drawer {drawer.id} snapped from y={requested_y:.2f} to y={y:.2f}")
    return y


def clamp_drawer_height(cabinet: Cabinet, drawer: Drawer, requested_height: float) -> float:
    """Clamp a drawer height so its bottom edge stops at the next drawer below.

    Returns:
        The new height for the drawer. The drawer itself is not modified.
    """
    limit = cabinet.height - drawer.y
    for neighbor in stack_neighbors(cabinet, drawer):
        if neighbor.y >= drawer.y:
            limit = min(limit, neighbor.y - drawer.y)
    height = min(max(requested_height, MIN_ACCESSORY_HEIGHT), limit)
    if _blocking_drawers(cabinet, drawer, drawer.y, height):
        return drawer.height
    return height


def clamp_accessory(cabinet: Cabinet, accessory: Accessory) -> bool:
    """Clamp an accessory's geometry into its cabinet.

    Returns:
        True if any field was changed.
    """
    before = (accessory.y, accessory.height, _horizontal_state(accessory))
    cabinet_height = cabinet.height

    accessory.height = clamp(accessory.height, MIN_ACCESSORY_HEIGHT, cabinet_height)
    accessory.y = clamp(accessory.y, 0.0, cabinet_height - accessory.height)

    match accessory:
        case Door():
            if accessory.width is not None:
                accessory.width = clamp(accessory.width, MIN_DOOR_WIDTH, cabinet.width)
        case Shelf() | Drawer() | HangingRod() | Led() | Divider():
            accessory.x = clamp(accessory.x, 0.0, cabinet.width)

    changed = before != (accessory.y, accessory.height, _horizontal_state(accessory))
    if changed:
        logger.debug(f"Clamped {accessory.kind.value} {accessory.id} into cabinet {cabinet.id}")
    return changed


def _horizontal_state(accessory: Accessory) -> float | None:
    match accessory:
        case Door():
            return accessory.width
        case _:
            return accessory.x


def _free_gaps(
    cabinet: Cabinet, drawer: Drawer, placed: list[Drawer]
) -> list[tuple[float, float]]:
    """Free vertical intervals in the drawer's column between placed drawers."""
    span = resolve_span(cabinet, drawer)
    occupied = sorted(
        (other.y, other.bottom)
        for other in placed
        if span.overlaps(resolve_span(cabinet, other), _EPSILON)
    )
    gaps: list[tuple[float, float]] = []
    cursor = 0.0
    for top, bottom in occupied:
        if top - cursor >= MIN_ACCESSORY_HEIGHT:
            gaps.append((cursor, top))
        cursor = max(cursor, bottom)
    if cabinet.height - cursor >= MIN_ACCESSORY_HEIGHT:
        gaps.append((cursor, cabinet.height))
    return gaps


def _squeeze_column(cabinet: Cabinet, drawer: Drawer, placed: list[Drawer]) -> bool:
    """Shrink a full drawer column proportionally so ``drawer`` fits below the rest.

    Drawers that would drop under the minimum height keep the minimum and
    the others share what is left. The column is restacked from the top.

    Returns:
        False, with every drawer untouched, if the column cannot hold its
        drawers even at the minimum height.
    """
    span = resolve_span(cabinet, drawer)
    column = sorted(
        (other for other in placed if span.overlaps(resolve_span(cabinet, other), _EPSILON)),
        key=lambda d: (d.y, d.id),
    )
    column.append(drawer)
    if len(column) * MIN_ACCESSORY_HEIGHT > cabinet.height + _EPSILON:
        return False

    originals = [(d.y, d.height) for d in column]
    heights = [d.height for d in column]
    floored: set[int] = set()
    scaled: dict[int, float] = {}
    while len(floored) < len(column):
        room = cabinet.height - MIN_ACCESSORY_HEIGHT * len(floored)
        flexible = sum(h for i, h in enumerate(heights) if i not in floored)
        scaled = {i: h * room / flexible for i, h in enumerate(heights) if i not in floored}
        small = {i for i, h in scaled.items() if h < MIN_ACCESSORY_HEIGHT}
        if not small:
            break
        floored |= small

    cursor = 0.0
    for i, member in enumerate(column):
        member.y = cursor
        member.height = MIN_ACCESSORY_HEIGHT if i in floored else min(heights[i], scaled[i])
        cursor = member.bottom

    others = placed + [drawer]
    if any(_overlaps_any(cabinet, m, [o for o in others if o is not m]) for m in column):
        for member, (y, height) in zip(column, originals):
            member.y, member.height = y, height
        return False

    logger.debug(
        f"Squeezed {len(column)} drawers in {cabinet.name} into {cabinet.height:.2f} cm"
    )
    return True


def settle_drawers(cabinet: Cabinet, squeeze: bool = False) -> bool:
    """Remove every overlap between stacked drawers of a cabinet.

    Drawers are visited top to bottom; higher drawers keep their place and a
    drawer overlapping one already visited is pushed below it. A drawer
    pushed out of the cabinet is moved into the free gap closest to where it
    was and shrunk to fit.

    Args:
        cabinet: Cabinet whose drawers are settled in place.
        squeeze: When a column has no free gap left, shrink all of its
            drawers proportionally instead of raising. Used when the cabinet
            itself got smaller.

    Returns:
        True if any drawer moved or changed height.

    Raises:
        StructuralInvariantError: If a drawer's column has no free space left
            (with ``squeeze``, only if it cannot hold its drawers at the
            minimum height).
    """
    changed = False
    placed: list[Drawer] = []
    for drawer in sorted(cabinet.drawers, key=lambda d: (d.y, d.id)):
        original = (drawer.y, drawer.height)

        for _ in range(len(placed) + 1):
            blocking_ids = {
                b.id for b in _blocking_drawers(cabinet, drawer, drawer.y, drawer.height)
            }
            blockers = [p for p in placed if p.id in blocking_ids]
            if not blockers:
                break
            drawer.y = max(b.bottom for b in blockers)

        if drawer.bottom > cabinet.height + _EPSILON or _overlaps_any(cabinet, drawer, placed):
            drawer.y = original[0]
            gaps = _free_gaps(cabinet, drawer, placed)
            if gaps:
                top, bottom = min(gaps, key=lambda g: abs(g[0] - original[0]))
                drawer.height = min(drawer.height, bottom - top)
                drawer.y = clamp(original[0], top, bottom - drawer.height)
            if not gaps or _overlaps_any(cabinet, drawer, placed):
                drawer.y, drawer.height = original
                if squeeze and _squeeze_column(cabinet, drawer, placed):
                    changed = True
                    placed.append(drawer)
                    continue
                raise StructuralInvariantError(
                    f"No free space left for drawer {drawer.id} in {cabinet.name}"
                )

        if (drawer.y, drawer.height) != original:
            changed = True
            logger.debug(
                f"Settled drawer {drawer.id}: y {original[0]:.2f} -> {drawer.y:.2f}, "
                f"height {original[1]:.2f} -> {drawer.height:.2f}"
            )
        placed.append(drawer)
    return changed


def _overlaps_any(cabinet: Cabinet, drawer: Drawer, placed: list[Drawer]) -> bool:
    blocking_ids = {b.id for b in _blocking_drawers(cabinet, drawer, drawer.y, drawer.height)}
    return any(p.id in blocking_ids for p in placed)


def normalize_cabinet(cabinet: Cabinet, squeeze: bool = False) -> bool:
    """Clamp every accessory and settle the drawers of a cabinet.

    ``squeeze`` is passed to :func:`settle_drawers`.

    Returns:
        True if anything changed.

    Raises:
        StructuralInvariantError: If the drawers cannot be settled.
    """
    changed = False
    for accessory in cabinet.accessories:
        changed = clamp_accessory(cabinet, accessory) or changed
    changed = settle_drawers(cabinet, squeeze) or changed
    return changed
