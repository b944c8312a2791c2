"""Transform from real-world centimeters to drawing-surface pixels.

The drawing surface is laid out top to bottom as: top padding, ceiling band,
the room (ceiling height in pixels), floor band, an optional dimension band,
bottom padding. Cabinets stand on the floor line and are laid out left to
right starting after the left padding, separated by a fixed gap.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entities import Cabinet, Design


@dataclass(frozen=True)
class ScaleConfig:
    """Scale and fixed paddings of the drawing surface.

    Attributes:
        scale: Pixels per centimeter.
        padding_left: Left padding in pixels; holds the ceiling-height dimension.
        padding_right: Right padding in pixels.
        padding_top: Top padding in pixels.
        padding_bottom: Bottom padding in pixels.
        ceiling_band: Height of the ceiling band in pixels.
        floor_band: Height of the floor band in pixels.
        dimension_band: Height reserved below the floor for the total-width
            dimension, only used when the design has more than one cabinet.
        cabinet_gap: Horizontal gap between neighboring cabinets in pixels.
            Zero lays cabinets out abutting.
    """

    scale: float = 3.0
    padding_left: float = 70.0
    padding_right: float = 40.0
    padding_top: float = 40.0
    padding_bottom: float = 20.0
    ceiling_band: float = 24.0
    floor_band: float = 24.0
    dimension_band: float = 36.0
    cabinet_gap: float = 12.0

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ValueError("Scale must be positive")
        if self.cabinet_gap < 0:
            raise ValueError("Cabinet gap cannot be negative")

    def to_pixels(self, cm: float) -> float:
        """Convert centimeters to pixels."""
        return cm * self.scale

    def to_centimeters(self, px: float) -> float:
        """Convert pixels to centimeters."""
        return px / self.scale


DEFAULT_SCALE = ScaleConfig()


def to_pixels(cm: float, config: ScaleConfig = DEFAULT_SCALE) -> float:
    """Convert centimeters to pixels using ``config``."""
    return config.to_pixels(cm)


def ceiling_line_y(config: ScaleConfig = DEFAULT_SCALE) -> float:
    """Pixel y of the ceiling line (bottom edge of the ceiling band)."""
    return config.padding_top + config.ceiling_band


def floor_line_y(design: Design, config: ScaleConfig = DEFAULT_SCALE) -> float:
    """Pixel y of the floor line (top edge of the floor band)."""
    return ceiling_line_y(config) + config.to_pixels(design.ceiling_height)


def cabinet_row_width(design: Design, config: ScaleConfig = DEFAULT_SCALE) -> float:
    """Pixel width of the cabinet row including the gaps between cabinets."""
    count = len(design.cabinets)
    gaps = config.cabinet_gap * max(0, count - 1)
    return sum(config.to_pixels(c.width) for c in design.cabinets) + gaps


def surface_size(
    design: Design, config: ScaleConfig = DEFAULT_SCALE
) -> tuple[float, float]:
    """Compute the drawing surface size for a design.

    Returns:
        ``(width, height)`` in pixels.
    """
    width = config.padding_left + cabinet_row_width(design, config) + config.padding_right
    height = (
        config.padding_top
        + config.ceiling_band
        + config.to_pixels(design.ceiling_height)
        + config.floor_band
        + config.padding_bottom
    )
    if len(design.cabinets) > 1:
        height += config.dimension_band
    return width, height


def cabinet_offsets(design: Design, config: ScaleConfig = DEFAULT_SCALE) -> list[float]:
    """Pixel x of the left edge of every cabinet, in row order."""
    offsets: list[float] = []
    x = config.padding_left
    for cabinet in design.cabinets:
        offsets.append(x)
        x += config.to_pixels(cabinet.width) + config.cabinet_gap
    return offsets


def cabinet_top_y(
    design: Design, cabinet: Cabinet, config: ScaleConfig = DEFAULT_SCALE
) -> float:
    """Pixel y of the top edge of a cabinet."""
    return floor_line_y(design, config) - config.to_pixels(cabinet.height)


def cabinet_at(
    design: Design, x: float, config: ScaleConfig = DEFAULT_SCALE
) -> int | None:
    """Hit-test a pointer x coordinate against the cabinet row.

    Scans cabinets left to right, accumulating pixel widths and gaps, until
    ``x`` falls within a cabinet's horizontal extent.

    Returns:
        Index of the hit cabinet, or None when ``x`` is in padding or a gap.
    """
    left = config.padding_left
    for index, cabinet in enumerate(design.cabinets):
        right = left + config.to_pixels(cabinet.width)
        if left <= x <= right:
            return index
        left = right + config.cabinet_gap
    return None
