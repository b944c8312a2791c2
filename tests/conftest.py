"""Pytest configuration and shared fixtures for cabinet-studio tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from cabinet_studio.domain import (
    AccessoryType,
    CabinetArchetype,
    Design,
    DesignEditor,
    MaterialZone,
    new_design,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "designs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "raster: tests needing the native cairo library")


def load_fixture(name: str) -> dict[str, Any]:
    """Load a design document fixture as decoded JSON."""
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def hallway_document() -> dict[str, Any]:
    """Valid two-cabinet document (one tall, one split)."""
    return load_fixture("hallway.json")


@pytest.fixture
def legacy_document() -> dict[str, Any]:
    """Legacy document with door-left/door-right and an 'opening' door."""
    return load_fixture("legacy_doors.json")


@pytest.fixture
def design() -> Design:
    """Single default tall cabinet (60 x 220 cm) under a 240 cm ceiling."""
    return new_design("Test design")


@pytest.fixture
def editor(design: Design) -> DesignEditor:
    return DesignEditor(design)


@pytest.fixture
def furnished_design() -> Design:
    """Tall plus split cabinet with assorted accessories, built through the editor."""
    design = new_design("Kitchen")
    editor = DesignEditor(design)
    editor.set_material(MaterialZone.EXTERIOR, "Oak")
    editor.set_material(MaterialZone.DRAWER, "Graphite")

    tall = design.cabinets[0]
    editor.add_accessory(tall.id, AccessoryType.SHELF)
    editor.add_accessory(tall.id, AccessoryType.DRAWER)
    editor.add_accessory(tall.id, AccessoryType.DRAWER)
    door = editor.add_accessory(tall.id, AccessoryType.DOOR)
    editor.update_accessory(tall.id, door.id, "width", 20)
    editor.update_accessory(tall.id, door.id, "hinge", "right")
    editor.add_accessory(tall.id, AccessoryType.LED)

    split = editor.add_cabinet(CabinetArchetype.SPLIT, 80)
    editor.add_accessory(split.id, AccessoryType.DIVIDER)
    rod = editor.add_accessory(split.id, AccessoryType.HANGING_ROD)
    editor.update_accessory(split.id, rod.id, "x", 50)
    editor.add_accessory(split.id, AccessoryType.DRAWER)
    return design
