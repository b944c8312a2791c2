"""Text prompt for the external rendering service.

The prompt describes the design the line drawing shows so the service can
turn the drawing into a realistic interior image. Compilation is a pure
function of the design, the vendor specifications and the environment.
"""

from collections import Counter
from collections.abc import Mapping

from cabinet_studio.domain.entities import Cabinet, Design, SplitProfile, TallProfile
from cabinet_studio.domain.value_objects import (
    AccessoryType,
    DoorState,
    EnvironmentSettings,
)

NOTES_KEY = "notes"

DEFAULT_VENDOR_SPECS = "18 mm particle board, standard hardware"
DEFAULT_MATERIALS = "white finish throughout"

HARD_CONSTRAINTS: tuple[str, ...] = (
    "Render only the objects present in the line drawing; do not invent furniture, "
    "decorations, plants or people.",
    "Keep the number and position of every cabinet and accessory exactly as drawn.",
    "Do not add handles, doors, drawers or shelves that are not in the drawing.",
    "Keep the straight-on front view and the proportions of the drawing.",
)

# (singular, plural) per accessory type
_ACCESSORY_NOUNS: dict[AccessoryType, tuple[str, str]] = {
    AccessoryType.DRAWER: ("drawer", "drawers"),
    AccessoryType.SHELF: ("shelf", "shelves"),
    AccessoryType.DOOR: ("door", "doors"),
    AccessoryType.HANGING_ROD: ("hanging rod", "hanging rods"),
    AccessoryType.LED: ("LED strip", "LED strips"),
    AccessoryType.DIVIDER: ("divider", "dividers"),
}


def _cm(value: float) -> str:
    return f"{value:g} cm"


def count_accessories(cabinet: Cabinet) -> str:
    """Summarize a cabinet's accessories, e.g. ``"2 drawers, 1 shelf"``."""
    counts = Counter(accessory.kind for accessory in cabinet.accessories)
    parts = []
    for kind in AccessoryType:
        count = counts.get(kind, 0)
        if count:
            singular, plural = _ACCESSORY_NOUNS[kind]
            parts.append(f"{count} {singular if count == 1 else plural}")
    return ", ".join(parts) if parts else "no accessories"


def describe_cabinet(cabinet: Cabinet, index: int) -> str:
    """One-line description of a cabinet's dimensions and contents."""
    match cabinet.profile:
        case TallProfile() as profile:
            shape = f"tall cabinet, {_cm(cabinet.width)} wide, {_cm(profile.height)} high"
        case SplitProfile() as profile:
            shape = (
                f"split cabinet, {_cm(cabinet.width)} wide, "
                f"base unit {_cm(profile.lower_height)} high, "
                f"upper unit {_cm(profile.upper_height)} high mounted "
                f"{_cm(profile.upper_elevation)} above the floor, "
                + ("with backsplash" if profile.has_backsplash else "without backsplash")
            )
    return f"- Cabinet {index + 1} ({cabinet.name}): {shape}; {count_accessories(cabinet)}"


def _materials_text(design: Design) -> list[str]:
    assigned = [
        f"- {zone.value}: {name}" for zone, name in design.materials.items() if name
    ]
    return assigned or [f"- {DEFAULT_MATERIALS}"]


def _vendor_text(vendor_specs: Mapping[str, str]) -> list[str]:
    specs = [
        f"- {key}: {value}"
        for key, value in vendor_specs.items()
        if key != NOTES_KEY and value
    ]
    return specs or [f"- {DEFAULT_VENDOR_SPECS}"]


def compile_prompt(
    design: Design,
    vendor_specs: Mapping[str, str] | None = None,
    environment: EnvironmentSettings | None = None,
) -> str:
    """Compile the rendering prompt for a design.

    Args:
        design: Design shown in the accompanying line drawing.
        vendor_specs: Vendor specification key/value pairs. The ``notes`` entry
            is free text and is appended verbatim at the very end.
        environment: Scene settings; defaults apply when omitted.

    Returns:
        The prompt text.
    """
    vendor_specs = vendor_specs or {}
    environment = environment or EnvironmentSettings(floor=design.floor)

    if environment.door_state is DoorState.OPEN:
        doors = "Doors: shown open, revealing the interior layout"
    else:
        doors = "Doors: closed"

    lines = [
        "Render this modular cabinet line drawing as a high-quality, photorealistic "
        "interior design image.",
        "",
        f"Design: {design.name}, ceiling height {_cm(design.ceiling_height)}, "
        f"total width {_cm(design.total_width)}",
        "Cabinets (left to right):",
        *(describe_cabinet(cabinet, i) for i, cabinet in enumerate(design.cabinets)),
        "",
        "Materials:",
        *_materials_text(design),
        "",
        "Vendor specifications:",
        *_vendor_text(vendor_specs),
        "",
        "Environment:",
        "- Ceiling: flat white ceiling",
        f"- Lighting: one spot light above each cabinet, {environment.light_temperature.label}",
        f"- Floor: {environment.floor.label}",
        f"- {doors}",
        "- View: straight-on front view",
        f"- Output aspect ratio: {environment.aspect_ratio.value}",
        "- Style: modern minimalist, realistic interior rendering",
        "",
        "Hard constraints:",
        *(f"- {constraint}" for constraint in HARD_CONSTRAINTS),
    ]

    notes = vendor_specs.get(NOTES_KEY, "")
    if notes:
        lines.extend(["", notes])
    return "\n".join(lines)
