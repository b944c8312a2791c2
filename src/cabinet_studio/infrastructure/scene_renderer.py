"""Front-elevation rendering of a design as SVG.

The same renderer backs the interactive editor and every export path. The only
difference is the ``interactive`` flag, which enables selection highlighting,
so exported drawings always match what is on screen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from xml.sax.saxutils import escape

from cabinet_studio.domain.accessories import (
    Accessory,
    Divider,
    Door,
    Drawer,
    HangingRod,
    Led,
    Shelf,
)
from cabinet_studio.domain.constraints import resolve_span
from cabinet_studio.domain.entities import Cabinet, Design, SplitProfile, TallProfile
from cabinet_studio.domain.geometry import (
    DEFAULT_SCALE,
    ScaleConfig,
    cabinet_offsets,
    ceiling_line_y,
    floor_line_y,
    surface_size,
)
from cabinet_studio.domain.value_objects import FloorFinish, LedPlacement, Span

logger = logging.getLogger(__name__)

# Carcass construction (cm)
PANEL_THICKNESS_CM = 1.8
KICK_HEIGHT_CM = 8.0

BACKGROUND = "#1e2a3a"
CEILING_FILL = "#2b3a4e"
CEILING_STROKE = "#94a3b8"
CABINET_FILL = "#26354a"
CABINET_STROKE = "#475569"
PANEL_FILL = "#334155"
BACKSPLASH_FILL = "#3f4f66"
TEXT_COLOR = "#94a3b8"
LABEL_COLOR = "#cbd5e1"
SELECTED_STROKE = "#38bdf8"
LIGHT_COLOR = "#fde68a"

ACCESSORY_COLORS: dict[type, str] = {
    Shelf: "#64748b",
    Drawer: "#8b5cf6",
    Door: "#3b82f6",
    HangingRod: "#f59e0b",
    Led: "#10b981",
    Divider: "#94a3b8",
}

# Two stripe colors per floor finish.
FLOOR_STRIPES: dict[FloorFinish, tuple[str, str]] = {
    FloorFinish.POLISHED: ("#cbd5e1", "#e2e8f0"),
    FloorFinish.WOOD_LIGHT: ("#d6b98c", "#c9a574"),
    FloorFinish.WOOD_DARK: ("#6b4a2b", "#5a3d22"),
}

_LED_GRADIENTS: dict[LedPlacement, tuple[str, str, str, str, str]] = {
    # placement: (id, x1, y1, x2, y2) of the glow direction
    LedPlacement.TOP: ("led-glow-down", "0", "0", "0", "1"),
    LedPlacement.BOTTOM: ("led-glow-up", "0", "1", "0", "0"),
    LedPlacement.LEFT: ("led-glow-right", "0", "0", "1", "0"),
    LedPlacement.RIGHT: ("led-glow-left", "1", "0", "0", "0"),
}

LED_GLOW_CM = 12.0


@dataclass(frozen=True)
class Selection:
    """Currently selected cabinet and/or accessory."""

    cabinet_id: str | None = None
    accessory_id: str | None = None


@dataclass(frozen=True)
class Rect:
    """Axis-aligned pixel rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def _n(value: float) -> str:
    """Format a pixel value for SVG output."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def _cm(value: float) -> str:
    return f"{value:g} cm"


class SceneRenderer:
    """Renders a :class:`Design` as a front-elevation SVG drawing.

    Attributes:
        scale: Scale and padding configuration of the drawing surface.
        interactive: Whether selection highlighting is drawn.
        show_dimensions: Whether dimension annotations are drawn.
    """

    def __init__(
        self,
        scale: ScaleConfig = DEFAULT_SCALE,
        interactive: bool = False,
        show_dimensions: bool = True,
    ) -> None:
        self.scale = scale
        self.interactive = interactive
        self.show_dimensions = show_dimensions

    def render(self, design: Design, selection: Selection | None = None) -> str:
        """Render the full design.

        Args:
            design: Design to draw.
            selection: Selected cabinet/accessory. Ignored unless the renderer
                is interactive.

        Returns:
            SVG document as a string.
        """
        selection = selection if self.interactive and selection else Selection()
        width, height = surface_size(design, self.scale)

        parts: list[str] = [
            f'<svg width="{_n(width)}" height="{_n(height)}" '
            f'viewBox="0 0 {_n(width)} {_n(height)}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            self._render_defs(design.floor),
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{_n(width)}" height="{_n(height)}" '
            f'fill="{BACKGROUND}"/>',
            "",
            "  <!-- Ceiling -->",
            self._render_ceiling(design, width),
            "",
            "  <!-- Floor -->",
            self._render_floor(design, width),
        ]

        offsets = cabinet_offsets(design, self.scale)
        for index, (cabinet, x) in enumerate(zip(design.cabinets, offsets)):
            parts.append("")
            parts.append(f"  <!-- Cabinet {index + 1}: {escape(cabinet.name)} -->")
            parts.append(self._render_cabinet(design, cabinet, index, x, selection))

        if self.show_dimensions:
            parts.append("")
            parts.append("  <!-- Dimensions -->")
            parts.append(self._render_ceiling_dimension(design))
            if len(design.cabinets) > 1:
                parts.append(self._render_total_width(design, offsets))

        parts.append("")
        parts.append("</svg>")
        logger.debug(f"Rendered design '{design.name}' at {width:.0f}x{height:.0f}px")
        return "\n".join(p for p in parts if p is not None)

    # ------------------------------------------------------------------
    # Room
    # ------------------------------------------------------------------

    def _render_defs(self, floor: FloorFinish) -> str:
        light, dark = FLOOR_STRIPES[floor]
        lines = [
            "  <defs>",
            '    <filter id="glow" x="-20%" y="-20%" width="140%" height="140%">',
            '      <feGaussianBlur stdDeviation="3" result="blur"/>',
            "      <feMerge>",
            '        <feMergeNode in="blur"/>',
            '        <feMergeNode in="SourceGraphic"/>',
            "      </feMerge>",
            "    </filter>",
            f'    <pattern id="floor-{floor.value}" width="16" height="16" '
            'patternUnits="userSpaceOnUse" patternTransform="rotate(45)">',
            f'      <rect width="16" height="16" fill="{light}"/>',
            f'      <rect width="8" height="16" fill="{dark}"/>',
            "    </pattern>",
        ]
        for gradient_id, x1, y1, x2, y2 in _LED_GRADIENTS.values():
            lines.extend(
                [
                    f'    <linearGradient id="{gradient_id}" x1="{x1}" y1="{y1}" '
                    f'x2="{x2}" y2="{y2}">',
                    f'      <stop offset="0%" stop-color="{ACCESSORY_COLORS[Led]}" '
                    'stop-opacity="0.6"/>',
                    f'      <stop offset="100%" stop-color="{ACCESSORY_COLORS[Led]}" '
                    'stop-opacity="0"/>',
                    "    </linearGradient>",
                ]
            )
        lines.append("  </defs>")
        return "\n".join(lines)

    def _render_ceiling(self, design: Design, width: float) -> str:
        top = self.scale.padding_top
        band = self.scale.ceiling_band
        return "\n".join(
            [
                f'  <rect x="0" y="{_n(top)}" width="{_n(width)}" height="{_n(band)}" '
                f'fill="{CEILING_FILL}"/>',
                f'  <line x1="0" y1="{_n(top + band)}" x2="{_n(width)}" '
                f'y2="{_n(top + band)}" stroke="{CEILING_STROKE}" '
                'stroke-dasharray="6,3"/>',
                f'  <text x="{_n(width / 2)}" y="{_n(top + band / 2 + 4)}" '
                f'font-size="11" text-anchor="middle" fill="{TEXT_COLOR}">'
                f"Ceiling {_cm(design.ceiling_height)}</text>",
            ]
        )

    def _render_floor(self, design: Design, width: float) -> str:
        top = floor_line_y(design, self.scale)
        band = self.scale.floor_band
        return "\n".join(
            [
                f'  <rect x="0" y="{_n(top)}" width="{_n(width)}" height="{_n(band)}" '
                f'fill="url(#floor-{design.floor.value})"/>',
                f'  <line x1="0" y1="{_n(top)}" x2="{_n(width)}" y2="{_n(top)}" '
                f'stroke="{CEILING_STROKE}"/>',
                f'  <text x="{_n(width / 2)}" y="{_n(top + band / 2 + 4)}" '
                f'font-size="11" text-anchor="middle" fill="{BACKGROUND}">'
                f"Floor: {escape(design.floor.label)}</text>",
            ]
        )

    # ------------------------------------------------------------------
    # Cabinets
    # ------------------------------------------------------------------

    def _render_cabinet(
        self,
        design: Design,
        cabinet: Cabinet,
        index: int,
        x: float,
        selection: Selection,
    ) -> str:
        px = self.scale.to_pixels
        width = px(cabinet.width)
        floor_y = floor_line_y(design, self.scale)
        top = floor_y - px(cabinet.height)
        selected = selection.cabinet_id == cabinet.id
        panel = px(PANEL_THICKNESS_CM)
        kick = px(KICK_HEIGHT_CM)

        parts: list[str] = [self._render_light(x + width / 2)]

        match cabinet.profile:
            case TallProfile():
                frame = Rect(x, top, width, px(cabinet.height))
                parts.append(self._render_frame(frame, kick, selected))
                inner = Rect(
                    frame.x + panel,
                    frame.y + panel,
                    frame.width - 2 * panel,
                    frame.height - 2 * panel - kick,
                )
            case SplitProfile() as profile:
                lower = Rect(x, floor_y - px(profile.lower_height), width, px(profile.lower_height))
                upper_top = floor_y - px(profile.upper_elevation + profile.upper_height)
                upper = Rect(x, upper_top, width, px(profile.upper_height))
                if profile.has_backsplash and profile.gap > 0:
                    parts.append(
                        f'  <rect x="{_n(x)}" y="{_n(upper.bottom)}" width="{_n(width)}" '
                        f'height="{_n(lower.y - upper.bottom)}" fill="{BACKSPLASH_FILL}" '
                        'fill-opacity="0.6"/>'
                    )
                parts.append(self._render_frame(lower, kick, selected))
                parts.append(self._render_frame(upper, 0.0, selected))
                inner = Rect(
                    x + panel,
                    upper.y + panel,
                    width - 2 * panel,
                    (lower.bottom - kick - panel) - (upper.y + panel),
                )

        for accessory in cabinet.accessories:
            parts.append(
                self._render_accessory(
                    cabinet, accessory, inner, selection.accessory_id == accessory.id
                )
            )

        if self.show_dimensions:
            parts.append(self._render_cabinet_labels(cabinet, index, x, top, floor_y, kick))
        return "\n".join(parts)

    def _render_light(self, center_x: float) -> str:
        y = ceiling_line_y(self.scale) + 6
        return "\n".join(
            [
                f'  <polygon points="{_n(center_x)},{_n(y)} {_n(center_x - 14)},{_n(y + 26)} '
                f'{_n(center_x + 14)},{_n(y + 26)}" fill="{LIGHT_COLOR}" fill-opacity="0.12"/>',
                f'  <circle cx="{_n(center_x)}" cy="{_n(y)}" r="4" fill="{LIGHT_COLOR}"/>',
            ]
        )

    def _render_frame(self, frame: Rect, kick: float, selected: bool) -> str:
        """Draw a carcass: outline, four panels and an optional kick plate."""
        panel = self.scale.to_pixels(PANEL_THICKNESS_CM)
        stroke, stroke_width, extra = self._stroke(CABINET_STROKE, 1.5, selected)
        bottom_panel_y = frame.bottom - kick - panel
        parts = [
            f'  <rect x="{_n(frame.x)}" y="{_n(frame.y)}" width="{_n(frame.width)}" '
            f'height="{_n(frame.height)}" rx="2" fill="{CABINET_FILL}" '
            f'stroke="{stroke}" stroke-width="{stroke_width}"{extra}/>',
            f'  <rect x="{_n(frame.x)}" y="{_n(frame.y)}" width="{_n(frame.width)}" '
            f'height="{_n(panel)}" fill="{PANEL_FILL}"/>',
            f'  <rect x="{_n(frame.x)}" y="{_n(frame.y)}" width="{_n(panel)}" '
            f'height="{_n(frame.height)}" fill="{PANEL_FILL}"/>',
            f'  <rect x="{_n(frame.right - panel)}" y="{_n(frame.y)}" width="{_n(panel)}" '
            f'height="{_n(frame.height)}" fill="{PANEL_FILL}"/>',
            f'  <rect x="{_n(frame.x)}" y="{_n(bottom_panel_y)}" width="{_n(frame.width)}" '
            f'height="{_n(panel)}" fill="{PANEL_FILL}"/>',
        ]
        if kick > 0:
            parts.append(
                f'  <rect x="{_n(frame.x + panel)}" y="{_n(frame.bottom - kick)}" '
                f'width="{_n(frame.width - 2 * panel)}" height="{_n(kick)}" '
                f'fill="{PANEL_FILL}" fill-opacity="0.5" stroke="{TEXT_COLOR}" '
                'stroke-dasharray="3,2" stroke-width="0.75"/>'
            )
        return "\n".join(parts)

    def _stroke(
        self, color: str, width: float, selected: bool
    ) -> tuple[str, float, str]:
        """Stroke color, width and extra attributes for a possibly selected element."""
        if selected:
            return SELECTED_STROKE, width + 1.5, ' filter="url(#glow)"'
        return color, width, ""

    def _render_cabinet_labels(
        self,
        cabinet: Cabinet,
        index: int,
        x: float,
        top: float,
        floor_y: float,
        kick: float,
    ) -> str:
        width = self.scale.to_pixels(cabinet.width)
        side_x = x + width + 8
        middle_y = (top + floor_y) / 2
        return "\n".join(
            [
                f'  <text x="{_n(x + width / 2)}" y="{_n(top - 8)}" font-size="10" '
                f'text-anchor="middle" fill="{TEXT_COLOR}">{_cm(cabinet.width)}</text>',
                f'  <text x="{_n(side_x)}" y="{_n(middle_y)}" font-size="10" '
                f'text-anchor="middle" fill="{TEXT_COLOR}" '
                f'transform="rotate(-90 {_n(side_x)} {_n(middle_y)})">'
                f"{_cm(cabinet.height)}</text>",
                f'  <text x="{_n(x + width / 2)}" y="{_n(floor_y - kick / 2 + 3)}" '
                f'font-size="9" text-anchor="middle" fill="{LABEL_COLOR}">'
                f"#{index + 1} {escape(cabinet.name)}</text>",
            ]
        )

    # ------------------------------------------------------------------
    # Accessories
    # ------------------------------------------------------------------

    def _span_rect(self, cabinet: Cabinet, span: Span, inner: Rect) -> tuple[float, float]:
        """Map a resolved span in cm onto the inner rectangle, as (x, width) in px."""
        ratio = inner.width / cabinet.width
        return inner.x + span.left * ratio, span.width * ratio

    def _vertical(self, cabinet: Cabinet, accessory: Accessory, inner: Rect) -> tuple[float, float]:
        """Map an accessory's vertical range onto the inner rectangle, as (y, height) in px."""
        ratio = inner.height / cabinet.height
        return inner.y + accessory.y * ratio, accessory.height * ratio

    def _render_accessory(
        self, cabinet: Cabinet, accessory: Accessory, inner: Rect, selected: bool
    ) -> str:
        span = resolve_span(cabinet, accessory)
        x, w = self._span_rect(cabinet, span, inner)
        y, h = self._vertical(cabinet, accessory, inner)
        color = ACCESSORY_COLORS[type(accessory)]
        stroke, stroke_width, extra = self._stroke(color, 1.0, selected)

        match accessory:
            case Shelf():
                return self._render_shelf(x, y, w, h, color, stroke, stroke_width, extra)
            case Drawer():
                return self._render_drawer(x, y, w, h, stroke, stroke_width, extra)
            case Door():
                return self._render_door(cabinet, accessory, inner, y, h, stroke, stroke_width, extra)
            case HangingRod():
                return self._render_rod(x, y, w, h, stroke, stroke_width, extra)
            case Led():
                return self._render_led(cabinet, accessory, inner, x, y, w, h, stroke, extra)
            case Divider():
                ratio = inner.width / cabinet.width
                divider_x = inner.x + accessory.x * ratio
                return (
                    f'  <rect x="{_n(divider_x - 1.5)}" y="{_n(y)}" width="3" '
                    f'height="{_n(h)}" fill="{color}" stroke="{stroke}" '
                    f'stroke-width="{stroke_width}"{extra}/>'
                )
        raise TypeError(f"Unsupported accessory: {accessory!r}")

    def _render_shelf(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        color: str,
        stroke: str,
        stroke_width: float,
        extra: str,
    ) -> str:
        thickness = max(h, 2.0)
        bracket = 6.0
        bracket_y = y + thickness
        return "\n".join(
            [
                f'  <rect x="{_n(x)}" y="{_n(y)}" width="{_n(w)}" height="{_n(thickness)}" '
                f'fill="{color}" stroke="{stroke}" stroke-width="{stroke_width}"{extra}/>',
                f'  <polyline points="{_n(x + 2)},{_n(bracket_y)} {_n(x + 2)},{_n(bracket_y + bracket)} '
                f'{_n(x + 2 + bracket)},{_n(bracket_y)}" fill="none" stroke="{color}"/>',
                f'  <polyline points="{_n(x + w - 2)},{_n(bracket_y)} '
                f'{_n(x + w - 2)},{_n(bracket_y + bracket)} '
                f'{_n(x + w - 2 - bracket)},{_n(bracket_y)}" fill="none" stroke="{color}"/>',
            ]
        )

    def _render_drawer(
        self, x: float, y: float, w: float, h: float, stroke: str, stroke_width: float, extra: str
    ) -> str:
        mid = y + h / 2
        return "\n".join(
            [
                f'  <rect x="{_n(x + 1)}" y="{_n(y)}" width="{_n(max(w - 2, 0))}" '
                f'height="{_n(h)}" rx="3" fill="{ACCESSORY_COLORS[Drawer]}" '
                f'fill-opacity="0.2" stroke="{stroke}" stroke-width="{stroke_width}"{extra}/>',
                f'  <line x1="{_n(x + w * 0.35)}" y1="{_n(mid)}" x2="{_n(x + w * 0.65)}" '
                f'y2="{_n(mid)}" stroke="{stroke}" stroke-width="1.5" stroke-linecap="round"/>',
            ]
        )

    def _render_door(
        self,
        cabinet: Cabinet,
        door: Door,
        inner: Rect,
        y: float,
        h: float,
        stroke: str,
        stroke_width: float,
        extra: str,
    ) -> str:
        ratio = inner.width / cabinet.width
        door_width = inner.width if door.width is None else door.width * ratio
        leaves: list[tuple[Rect, str]] = []  # (leaf, hinge side)

        if door.width is None:
            leaves.append((Rect(inner.x, y, door_width, h), door.effective_hinge.value))
        elif door.is_single:
            left = inner.x if door.effective_hinge.value == "left" else inner.right - door_width
            leaves.append((Rect(left, y, door_width, h), door.effective_hinge.value))
        else:
            left = inner.x + (inner.width - door_width) / 2
            half = door_width / 2
            leaves.append((Rect(left, y, half, h), "left"))
            leaves.append((Rect(left + half, y, half, h), "right"))

        parts: list[str] = []
        for leaf, hinge in leaves:
            parts.append(
                f'  <rect x="{_n(leaf.x + 1)}" y="{_n(leaf.y)}" width="{_n(max(leaf.width - 2, 0))}" '
                f'height="{_n(leaf.height)}" fill="{ACCESSORY_COLORS[Door]}" fill-opacity="0.08" '
                f'stroke="{stroke}" stroke-width="{stroke_width + 0.5}"{extra}/>'
            )
            hinge_x = leaf.x + 5 if hinge == "left" else leaf.right - 5
            handle_x = leaf.right - 8 if hinge == "left" else leaf.x + 8
            for dot_y in (leaf.y + 8, leaf.bottom - 8):
                parts.append(
                    f'  <circle cx="{_n(hinge_x)}" cy="{_n(dot_y)}" r="1.8" fill="{TEXT_COLOR}"/>'
                )
            parts.append(
                f'  <line x1="{_n(handle_x)}" y1="{_n(leaf.y + leaf.height * 0.4)}" '
                f'x2="{_n(handle_x)}" y2="{_n(leaf.y + leaf.height * 0.6)}" '
                f'stroke="{TEXT_COLOR}" stroke-width="2" stroke-linecap="round"/>'
            )
        return "\n".join(parts)

    def _render_rod(
        self, x: float, y: float, w: float, h: float, stroke: str, stroke_width: float, extra: str
    ) -> str:
        rod_y = y + h / 2
        return "\n".join(
            [
                f'  <line x1="{_n(x + 4)}" y1="{_n(rod_y)}" x2="{_n(x + w - 4)}" y2="{_n(rod_y)}" '
                f'stroke="{stroke}" stroke-width="{max(stroke_width + 1, h / 2)}" '
                f'stroke-linecap="round"{extra}/>',
                f'  <line x1="{_n(x + 4)}" y1="{_n(y - 4)}" x2="{_n(x + 4)}" y2="{_n(rod_y)}" '
                f'stroke="{stroke}" stroke-width="1.5"/>',
                f'  <line x1="{_n(x + w - 4)}" y1="{_n(y - 4)}" x2="{_n(x + w - 4)}" '
                f'y2="{_n(rod_y)}" stroke="{stroke}" stroke-width="1.5"/>',
            ]
        )

    def _render_led(
        self,
        cabinet: Cabinet,
        led: Led,
        inner: Rect,
        x: float,
        y: float,
        w: float,
        h: float,
        stroke: str,
        extra: str,
    ) -> str:
        color = ACCESSORY_COLORS[Led]
        gradient_id = _LED_GRADIENTS[led.placement][0]
        glow = self.scale.to_pixels(LED_GLOW_CM)
        thickness = max(h, 2.0)

        match led.placement:
            case LedPlacement.TOP:
                bar = Rect(x, y, w, thickness)
                halo = Rect(x, bar.bottom, w, glow)
            case LedPlacement.BOTTOM:
                bar = Rect(x, y, w, thickness)
                halo = Rect(x, max(inner.y, y - glow), w, min(glow, y - inner.y))
            case LedPlacement.LEFT | LedPlacement.RIGHT:
                length = self._compartment_height(cabinet, led, inner, y)
                bar_x = x if led.placement is LedPlacement.LEFT else x + w - thickness
                bar = Rect(bar_x, y, thickness, length)
                halo_x = bar.right if led.placement is LedPlacement.LEFT else bar.x - min(glow, w)
                halo = Rect(halo_x, y, min(glow, w), length)

        return "\n".join(
            [
                f'  <rect x="{_n(halo.x)}" y="{_n(halo.y)}" width="{_n(halo.width)}" '
                f'height="{_n(max(halo.height, 0))}" fill="url(#{gradient_id})"/>',
                f'  <rect x="{_n(bar.x)}" y="{_n(bar.y)}" width="{_n(bar.width)}" '
                f'height="{_n(bar.height)}" fill="{color}" stroke="{stroke}"{extra}/>',
            ]
        )

    def _compartment_height(self, cabinet: Cabinet, led: Led, inner: Rect, y: float) -> float:
        """Pixel distance from a vertical LED strip down to the next shelf in its column."""
        span = resolve_span(cabinet, led)
        ratio = inner.height / cabinet.height
        limit = inner.bottom
        for other in cabinet.accessories:
            if isinstance(other, Shelf) and other.y > led.y:
                if span.overlaps(resolve_span(cabinet, other)):
                    limit = min(limit, inner.y + other.y * ratio)
        return max(limit - y, 2.0)

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    def _render_ceiling_dimension(self, design: Design) -> str:
        x = self.scale.padding_left / 2
        top = ceiling_line_y(self.scale)
        bottom = floor_line_y(design, self.scale)
        middle = (top + bottom) / 2
        return "\n".join(
            [
                f'  <line x1="{_n(x)}" y1="{_n(top)}" x2="{_n(x)}" y2="{_n(bottom)}" '
                f'stroke="{TEXT_COLOR}" stroke-width="0.75"/>',
                f'  <line x1="{_n(x - 5)}" y1="{_n(top)}" x2="{_n(x + 5)}" y2="{_n(top)}" '
                f'stroke="{TEXT_COLOR}"/>',
                f'  <line x1="{_n(x - 5)}" y1="{_n(bottom)}" x2="{_n(x + 5)}" y2="{_n(bottom)}" '
                f'stroke="{TEXT_COLOR}"/>',
                f'  <text x="{_n(x - 8)}" y="{_n(middle)}" font-size="10" text-anchor="middle" '
                f'fill="{TEXT_COLOR}" transform="rotate(-90 {_n(x - 8)} {_n(middle)})">'
                f"{_cm(design.ceiling_height)}</text>",
            ]
        )

    def _render_total_width(self, design: Design, offsets: list[float]) -> str:
        left = offsets[0]
        right = offsets[-1] + self.scale.to_pixels(design.cabinets[-1].width)
        y = floor_line_y(design, self.scale) + self.scale.floor_band + self.scale.dimension_band / 2
        return "\n".join(
            [
                f'  <line x1="{_n(left)}" y1="{_n(y)}" x2="{_n(right)}" y2="{_n(y)}" '
                f'stroke="{TEXT_COLOR}" stroke-width="0.75"/>',
                f'  <line x1="{_n(left)}" y1="{_n(y - 5)}" x2="{_n(left)}" y2="{_n(y + 5)}" '
                f'stroke="{TEXT_COLOR}"/>',
                f'  <line x1="{_n(right)}" y1="{_n(y - 5)}" x2="{_n(right)}" y2="{_n(y + 5)}" '
                f'stroke="{TEXT_COLOR}"/>',
                f'  <text x="{_n((left + right) / 2)}" y="{_n(y - 4)}" font-size="10" '
                f'text-anchor="middle" fill="{TEXT_COLOR}">Total {_cm(design.total_width)}</text>',
            ]
        )
