"""Upgrades of legacy design documents to the current format.

Migrations run on the raw decoded JSON before validation. Each one is a plain
function that edits the document in place and returns a short description
of every change it made, so the ``migrate`` command can report them.
"""

import copy
import logging
from collections.abc import Callable
from typing import Any

from cabinet_studio.application.document.schema import FORMAT_VERSION

logger = logging.getLogger(__name__)

_LEGACY_DOOR_TYPES = {"door-left": "left", "door-right": "right"}

_LEGACY_CABINET_KEYS = {
    "lowerHeight": "lower_height",
    "upperHeight": "upper_height",
    "upperElevation": "upper_elevation",
    "hasBacksplash": "has_backsplash",
}


def _rename_key(data: dict[str, Any], old: str, new: str) -> bool:
    if old not in data:
        return False
    value = data.pop(old)
    data.setdefault(new, value)
    return True


def _stringify_id(data: dict[str, Any]) -> bool:
    entity_id = data.get("id")
    if isinstance(entity_id, (int, float)) and not isinstance(entity_id, bool):
        data["id"] = str(entity_id)
        return True
    return False


def _cabinets(document: dict[str, Any]) -> list[dict[str, Any]]:
    cabinets = document.get("cabinets")
    if not isinstance(cabinets, list):
        return []
    return [c for c in cabinets if isinstance(c, dict)]


def _accessories(cabinet: dict[str, Any]) -> list[dict[str, Any]]:
    accessories = cabinet.get("accessories")
    if not isinstance(accessories, list):
        return []
    return [a for a in accessories if isinstance(a, dict)]


def migrate_design_keys(document: dict[str, Any]) -> list[str]:
    """Rename legacy ``ceilingH`` and add a missing format version."""
    changes: list[str] = []
    if _rename_key(document, "ceilingH", "ceiling_height"):
        changes.append("renamed ceilingH to ceiling_height")
    if "format_version" not in document:
        document["format_version"] = FORMAT_VERSION
        changes.append(f"set format_version to {FORMAT_VERSION}")
    return changes


def migrate_cabinets(document: dict[str, Any]) -> list[str]:
    """Default a missing archetype to tall and normalize legacy cabinet keys."""
    changes: list[str] = []
    for index, cabinet in enumerate(_cabinets(document)):
        label = f"cabinets[{index}]"
        if _stringify_id(cabinet):
            changes.append(f"{label}: converted numeric id to string")
        if "archetype" not in cabinet:
            cabinet["archetype"] = "tall"
            changes.append(f"{label}: set missing archetype to tall")
        for old, new in _LEGACY_CABINET_KEYS.items():
            if _rename_key(cabinet, old, new):
                changes.append(f"{label}: renamed {old} to {new}")
    return changes


def migrate_doors(document: dict[str, Any]) -> list[str]:
    """Turn ``door-left``/``door-right`` and ``opening`` into ``door`` with ``hinge``."""
    changes: list[str] = []
    for c_index, cabinet in enumerate(_cabinets(document)):
        for a_index, accessory in enumerate(_accessories(cabinet)):
            label = f"cabinets[{c_index}].accessories[{a_index}]"
            if _stringify_id(accessory):
                changes.append(f"{label}: converted numeric id to string")
            legacy_type = accessory.get("type")
            if legacy_type in _LEGACY_DOOR_TYPES:
                accessory["type"] = "door"
                accessory.setdefault("hinge", _LEGACY_DOOR_TYPES[legacy_type])
                changes.append(f"{label}: converted {legacy_type} to door")
            if accessory.get("type") == "door" and _rename_key(accessory, "opening", "hinge"):
                changes.append(f"{label}: renamed opening to hinge")
    return changes


MIGRATIONS: list[Callable[[dict[str, Any]], list[str]]] = [
    migrate_design_keys,
    migrate_cabinets,
    migrate_doors,
]


def migrate_document(data: Any) -> tuple[Any, list[str]]:
    """Apply every migration to a decoded document.

    The input is never modified. Anything that is not a JSON object is
    returned unchanged and left for validation to reject.

    Args:
        data: Decoded JSON document.

    Returns:
        Tuple of (migrated document, descriptions of the applied changes).
    """
    if not isinstance(data, dict):
        return data, []
    document = copy.deepcopy(data)
    changes: list[str] = []
    for migration in MIGRATIONS:
        changes.extend(migration(document))
    for change in changes:
        logger.debug(f"Migration: {change}")
    return document, changes
