"""Tests for the front-elevation SVG renderer."""

import xml.etree.ElementTree as ET

import pytest

from cabinet_studio.domain import (
    AccessoryType,
    CabinetArchetype,
    Design,
    DesignEditor,
    FloorFinish,
    new_design,
)
from cabinet_studio.infrastructure.scene_renderer import (
    SELECTED_STROKE,
    SceneRenderer,
    Selection,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def texts(svg: str) -> list[str]:
    root = ET.fromstring(svg)
    return [el.text or "" for el in root.iter(f"{SVG_NS}text")]


def door_leaves(svg: str) -> int:
    return svg.count('fill-opacity="0.08"')


@pytest.fixture
def renderer() -> SceneRenderer:
    return SceneRenderer()


class TestDocument:
    """Tests for the overall SVG document."""

    def test_is_well_formed(self, renderer: SceneRenderer, furnished_design: Design) -> None:
        root = ET.fromstring(renderer.render(furnished_design))

        assert root.tag == f"{SVG_NS}svg"
        assert root.get("width") == "542"
        assert root.get("height") == "864"
        assert root.get("viewBox") == "0 0 542 864"

    def test_room_labels(self, renderer: SceneRenderer, design: Design) -> None:
        labels = texts(renderer.render(design))

        assert "Ceiling 240 cm" in labels
        assert "Floor: light wood floor" in labels

    def test_floor_pattern_follows_finish(self, renderer: SceneRenderer, design: Design) -> None:
        DesignEditor(design).set_floor(FloorFinish.WOOD_DARK)
        svg = renderer.render(design)

        assert 'id="floor-wood-dark"' in svg
        assert "Floor: dark wood floor" in texts(svg)

    def test_cabinet_labels(self, renderer: SceneRenderer, design: Design) -> None:
        labels = texts(renderer.render(design))

        assert "60 cm" in labels
        assert "220 cm" in labels
        assert "#1 Cabinet #1" in labels

    def test_names_are_escaped(self, renderer: SceneRenderer, design: Design) -> None:
        DesignEditor(design).rename_cabinet(design.cabinets[0].id, "Tom & Jerry's <box>")
        labels = texts(renderer.render(design))
        assert "#1 Tom & Jerry's <box>" in labels

    def test_total_width_only_for_several_cabinets(
        self, renderer: SceneRenderer, design: Design
    ) -> None:
        assert not any(t.startswith("Total") for t in texts(renderer.render(design)))

        DesignEditor(design).add_cabinet(width=80)
        assert "Total 140 cm" in texts(renderer.render(design))

    def test_dimensions_can_be_hidden(self, design: Design) -> None:
        DesignEditor(design).add_cabinet()
        svg = SceneRenderer(show_dimensions=False).render(design)
        assert "<!-- Dimensions -->" not in svg

    def test_one_comment_per_cabinet(self, renderer: SceneRenderer) -> None:
        design = new_design("Row", 3)
        svg = renderer.render(design)
        for index in range(1, 4):
            assert f"<!-- Cabinet {index}: Cabinet #{index} -->" in svg

    def test_every_accessory_kind_renders(
        self, renderer: SceneRenderer, design: Design
    ) -> None:
        editor = DesignEditor(design)
        cabinet = design.cabinets[0]
        for kind in AccessoryType:
            editor.add_accessory(cabinet.id, kind)

        ET.fromstring(renderer.render(design))


class TestSplitCabinet:
    """Tests for split cabinet drawing."""

    def test_backsplash_drawn(self, renderer: SceneRenderer, design: Design) -> None:
        DesignEditor(design).add_cabinet(CabinetArchetype.SPLIT)
        assert 'fill-opacity="0.6"' in renderer.render(design)

    def test_backsplash_omitted(self, renderer: SceneRenderer, design: Design) -> None:
        editor = DesignEditor(design)
        cabinet = editor.add_cabinet(CabinetArchetype.SPLIT)
        editor.set_split_dimension(cabinet.id, "has_backsplash", False)
        assert 'fill-opacity="0.6"' not in renderer.render(design)


class TestDoors:
    """Tests for door leaf layout."""

    @pytest.fixture
    def door_design(self, design: Design):
        editor = DesignEditor(design)
        cabinet = design.cabinets[0]
        door = editor.add_accessory(cabinet.id, AccessoryType.DOOR)
        return editor, cabinet, door

    def test_full_width_door(self, renderer: SceneRenderer, door_design) -> None:
        editor, _, _ = door_design
        assert door_leaves(renderer.render(editor.design)) == 1

    def test_double_door(self, renderer: SceneRenderer, door_design) -> None:
        editor, cabinet, door = door_design
        editor.update_accessory(cabinet.id, door.id, "width", 50)
        assert door_leaves(renderer.render(editor.design)) == 2

    def test_single_door(self, renderer: SceneRenderer, door_design) -> None:
        editor, cabinet, door = door_design
        editor.update_accessory(cabinet.id, door.id, "width", 20)
        svg = renderer.render(editor.design)

        assert door_leaves(svg) == 1
        # Two hinge dots per leaf
        assert svg.count('r="1.8"') == 2


class TestSelection:
    """Tests for selection highlighting."""

    def test_interactive_highlights_selected_cabinet(self, design: Design) -> None:
        cabinet = design.cabinets[0]
        svg = SceneRenderer(interactive=True).render(design, Selection(cabinet.id))

        assert "url(#glow)" in svg
        assert SELECTED_STROKE in svg

    def test_interactive_highlights_selected_accessory(self, design: Design) -> None:
        cabinet = design.cabinets[0]
        shelf = DesignEditor(design).add_accessory(cabinet.id, AccessoryType.SHELF)
        svg = SceneRenderer(interactive=True).render(design, Selection(cabinet.id, shelf.id))
        assert svg.count("url(#glow)") >= 2

    def test_static_render_ignores_selection(self, design: Design) -> None:
        cabinet = design.cabinets[0]
        svg = SceneRenderer().render(design, Selection(cabinet.id))

        assert "url(#glow)" not in svg
        assert SELECTED_STROKE not in svg

    def test_nothing_selected(self, design: Design) -> None:
        svg = SceneRenderer(interactive=True).render(design)
        assert "url(#glow)" not in svg
