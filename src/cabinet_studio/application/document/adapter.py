"""Conversion between design documents and domain objects.

``document_to_design`` builds a new Design from a validated document; it never
touches an existing one. Identifiers are preserved and only generated where
the document has none. ``design_to_document`` is its inverse.
"""

from cabinet_studio.application.document.schema import (
    FORMAT_VERSION,
    AnyAccessoryModel,
    CabinetModel,
    DesignDocument,
    DividerModel,
    DoorModel,
    DrawerModel,
    HangingRodModel,
    LedModel,
    ShelfModel,
    SplitCabinetModel,
    TallCabinetModel,
)
from cabinet_studio.domain.accessories import (
    Accessory,
    Divider,
    Door,
    Drawer,
    HangingRod,
    Led,
    Shelf,
    new_id,
)
from cabinet_studio.domain.entities import (
    Cabinet,
    CabinetProfile,
    Design,
    SplitProfile,
    TallProfile,
    default_materials,
)
from cabinet_studio.domain.value_objects import (
    MAX_CABINET_WIDTH,
    MAX_CEILING_HEIGHT,
    MIN_CABINET_WIDTH,
    MIN_CEILING_HEIGHT,
    clamp,
)


def _accessory_from_model(model: AnyAccessoryModel) -> Accessory:
    accessory_id = model.id or new_id()
    match model:
        case ShelfModel():
            return Shelf(id=accessory_id, y=model.y, height=model.height, x=model.x)
        case DrawerModel():
            return Drawer(id=accessory_id, y=model.y, height=model.height, x=model.x)
        case HangingRodModel():
            return HangingRod(id=accessory_id, y=model.y, height=model.height, x=model.x)
        case LedModel():
            return Led(
                id=accessory_id,
                y=model.y,
                height=model.height,
                x=model.x,
                placement=model.placement,
            )
        case DoorModel():
            return Door(
                id=accessory_id,
                y=model.y,
                height=model.height,
                width=model.width,
                hinge=model.hinge,
            )
        case DividerModel():
            return Divider(id=accessory_id, y=model.y, height=model.height, x=model.x)
    raise TypeError(f"Unsupported accessory model: {model!r}")


def _cabinet_from_model(model: TallCabinetModel | SplitCabinetModel, index: int) -> Cabinet:
    profile: CabinetProfile
    match model:
        case TallCabinetModel():
            profile = TallProfile(height=model.height)
        case SplitCabinetModel():
            profile = SplitProfile(
                lower_height=model.lower_height,
                upper_height=model.upper_height,
                upper_elevation=model.upper_elevation,
                has_backsplash=model.has_backsplash,
            )
    return Cabinet(
        id=model.id or new_id(),
        name=model.name or f"Cabinet #{index + 1}",
        width=clamp(model.width, MIN_CABINET_WIDTH, MAX_CABINET_WIDTH),
        profile=profile,
        accessories=[_accessory_from_model(a) for a in model.accessories],
    )


def document_to_design(document: DesignDocument) -> Design:
    """Build a new Design from a validated document.

    Dimensions are clamped into their bounds; accessory placement is left to
    the caller's normalization pass.
    """
    materials = default_materials()
    materials.update(document.materials)
    return Design(
        name=document.name,
        ceiling_height=clamp(document.ceiling_height, MIN_CEILING_HEIGHT, MAX_CEILING_HEIGHT),
        floor=document.floor,
        materials=materials,
        cabinets=[_cabinet_from_model(c, i) for i, c in enumerate(document.cabinets)],
    )


def _accessory_to_model(accessory: Accessory) -> AnyAccessoryModel:
    common = {"id": accessory.id, "y": accessory.y, "height": accessory.height}
    match accessory:
        case Shelf():
            return ShelfModel(type="shelf", x=accessory.x, **common)
        case Drawer():
            return DrawerModel(type="drawer", x=accessory.x, **common)
        case HangingRod():
            return HangingRodModel(type="hanging-rod", x=accessory.x, **common)
        case Led():
            return LedModel(type="led", x=accessory.x, placement=accessory.placement, **common)
        case Door():
            return DoorModel(type="door", width=accessory.width, hinge=accessory.hinge, **common)
        case Divider():
            return DividerModel(type="divider", x=accessory.x, **common)
    raise TypeError(f"Unsupported accessory: {accessory!r}")


def _cabinet_to_model(cabinet: Cabinet) -> CabinetModel:
    accessories = [_accessory_to_model(a) for a in cabinet.accessories]
    match cabinet.profile:
        case TallProfile() as profile:
            return TallCabinetModel(
                archetype="tall",
                id=cabinet.id,
                name=cabinet.name,
                width=cabinet.width,
                height=profile.height,
                accessories=accessories,
            )
        case SplitProfile() as profile:
            return SplitCabinetModel(
                archetype="split",
                id=cabinet.id,
                name=cabinet.name,
                width=cabinet.width,
                lower_height=profile.lower_height,
                upper_height=profile.upper_height,
                upper_elevation=profile.upper_elevation,
                has_backsplash=profile.has_backsplash,
                accessories=accessories,
            )
    raise TypeError(f"Unsupported cabinet profile: {cabinet.profile!r}")


def design_to_document(design: Design) -> DesignDocument:
    """Snapshot a Design as a document."""
    return DesignDocument(
        format_version=FORMAT_VERSION,
        name=design.name,
        ceiling_height=design.ceiling_height,
        floor=design.floor,
        materials=dict(design.materials),
        cabinets=[_cabinet_to_model(c) for c in design.cabinets],
    )
