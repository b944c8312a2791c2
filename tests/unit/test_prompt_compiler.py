"""Tests for rendering prompt compilation."""

from cabinet_studio.application.prompt_compiler import (
    DEFAULT_MATERIALS,
    DEFAULT_VENDOR_SPECS,
    HARD_CONSTRAINTS,
    compile_prompt,
    count_accessories,
    describe_cabinet,
)
from cabinet_studio.domain import (
    AccessoryType,
    AspectRatio,
    CabinetArchetype,
    Design,
    DesignEditor,
    DoorState,
    EnvironmentSettings,
    FloorFinish,
    LightTemperature,
    MaterialZone,
)


class TestCounts:
    """Tests for accessory summaries."""

    def test_empty_cabinet(self, design: Design) -> None:
        assert count_accessories(design.cabinets[0]) == "no accessories"

    def test_counts_in_fixed_order(self, design: Design) -> None:
        editor = DesignEditor(design)
        cabinet = design.cabinets[0]
        editor.add_accessory(cabinet.id, AccessoryType.SHELF)
        editor.add_accessory(cabinet.id, AccessoryType.DRAWER)
        editor.add_accessory(cabinet.id, AccessoryType.DRAWER)

        assert count_accessories(cabinet) == "2 drawers, 1 shelf"

    def test_plurals(self, design: Design) -> None:
        editor = DesignEditor(design)
        cabinet = design.cabinets[0]
        for kind in (AccessoryType.SHELF, AccessoryType.LED, AccessoryType.HANGING_ROD):
            editor.add_accessory(cabinet.id, kind)
            editor.add_accessory(cabinet.id, kind)

        assert count_accessories(cabinet) == "2 shelves, 2 hanging rods, 2 LED strips"


class TestDescribeCabinet:
    """Tests for per-cabinet lines."""

    def test_tall(self, design: Design) -> None:
        assert describe_cabinet(design.cabinets[0], 0) == (
            "- Cabinet 1 (Cabinet #1): tall cabinet, 60 cm wide, 220 cm high; no accessories"
        )

    def test_split(self, design: Design) -> None:
        cabinet = DesignEditor(design).add_cabinet(CabinetArchetype.SPLIT, 80)
        assert describe_cabinet(cabinet, 1) == (
            "- Cabinet 2 (Cabinet #2): split cabinet, 80 cm wide, base unit 85 cm high, "
            "upper unit 70 cm high mounted 145 cm above the floor, with backsplash; "
            "no accessories"
        )


class TestCompilePrompt:
    """Tests for the full prompt."""

    def test_defaults(self, design: Design) -> None:
        prompt = compile_prompt(design)

        assert "Design: Test design, ceiling height 240 cm, total width 60 cm" in prompt
        assert f"- {DEFAULT_MATERIALS}" in prompt
        assert f"- {DEFAULT_VENDOR_SPECS}" in prompt
        assert "- Floor: light wood floor" in prompt
        assert "- Doors: closed" in prompt
        assert "- Output aspect ratio: 16:9" in prompt
        assert "natural white (4000K)" in prompt
        for constraint in HARD_CONSTRAINTS:
            assert f"- {constraint}" in prompt
        assert prompt.endswith(f"- {HARD_CONSTRAINTS[-1]}")

    def test_sections_in_order(self, furnished_design: Design) -> None:
        prompt = compile_prompt(furnished_design)
        headings = [
            "Cabinets (left to right):",
            "Materials:",
            "Vendor specifications:",
            "Environment:",
            "Hard constraints:",
        ]
        positions = [prompt.index(h) for h in headings]
        assert positions == sorted(positions)

    def test_assigned_materials_only(self, furnished_design: Design) -> None:
        prompt = compile_prompt(furnished_design)

        assert "- exterior: Oak" in prompt
        assert "- drawer: Graphite" in prompt
        assert "- interior:" not in prompt
        assert DEFAULT_MATERIALS not in prompt

    def test_environment(self, design: Design) -> None:
        environment = EnvironmentSettings(
            floor=FloorFinish.POLISHED,
            light_temperature=LightTemperature.WARM,
            door_state=DoorState.OPEN,
            aspect_ratio=AspectRatio.SQUARE,
        )
        prompt = compile_prompt(design, environment=environment)

        assert "warm white (3000K)" in prompt
        assert "- Floor: polished tile floor" in prompt
        assert "- Doors: shown open, revealing the interior layout" in prompt
        assert "- Output aspect ratio: 1:1" in prompt

    def test_vendor_specs_and_notes(self, design: Design) -> None:
        notes = "Keep the plinth recessed.\nNo visible screws."
        prompt = compile_prompt(
            design,
            vendor_specs={"board": "19 mm birch plywood", "hinges": "", "notes": notes},
        )

        assert "- board: 19 mm birch plywood" in prompt
        assert "- hinges" not in prompt
        assert "- notes" not in prompt
        assert DEFAULT_VENDOR_SPECS not in prompt
        assert prompt.endswith(notes)

    def test_is_deterministic(self, furnished_design: Design) -> None:
        assert compile_prompt(furnished_design) == compile_prompt(furnished_design)

    def test_material_change_reaches_prompt(self, design: Design) -> None:
        DesignEditor(design).set_material(MaterialZone.DOOR, "Smoked glass")
        assert "- door: Smoked glass" in compile_prompt(design)
