"""Tests for the interactive editing session."""

import pytest

from cabinet_studio.application.document import ParseError
from cabinet_studio.application.session import EditorSession
from cabinet_studio.contracts import (
    RenderInProgressError,
    RenderingServiceError,
    RenderResult,
)
from cabinet_studio.domain import (
    AccessoryType,
    CabinetArchetype,
    Design,
    DoorState,
    EditStatus,
    EnvironmentSettings,
    StructuralInvariantError,
    UnknownEntityError,
)
from cabinet_studio.infrastructure.exporters import SvgExporter
from cabinet_studio.infrastructure.scene_renderer import SceneRenderer, Selection


class CountingRenderer(SceneRenderer):
    """Interactive renderer that counts full redraws."""

    def __init__(self) -> None:
        super().__init__(interactive=True)
        self.renders = 0

    def render(self, design, selection=None):
        self.renders += 1
        return super().render(design, selection)


class FakeRenderingService:
    """Records requests and returns a canned image or raises."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[bytes, str, str]] = []

    def render(self, image: bytes, mime_type: str, prompt: str) -> RenderResult:
        self.calls.append((image, mime_type, prompt))
        if self.error is not None:
            raise self.error
        return RenderResult(image_data=b"\x89PNG fake")


@pytest.fixture
def renderer() -> CountingRenderer:
    return CountingRenderer()


@pytest.fixture
def session(design: Design, renderer: CountingRenderer) -> EditorSession:
    return EditorSession(design, renderer=renderer, encoder=SvgExporter())


class TestRedraw:
    """Every mutation is followed by a full redraw."""

    def test_initial_render(self, session: EditorSession, renderer: CountingRenderer) -> None:
        assert session.svg.startswith("<svg")
        assert renderer.renders == 1

    def test_successful_edit_redraws(self, session: EditorSession) -> None:
        before = session.svg
        session.add_cabinet()
        assert session.svg != before

    def test_failed_edit_still_redraws(
        self, session: EditorSession, renderer: CountingRenderer
    ) -> None:
        count = renderer.renders
        with pytest.raises(StructuralInvariantError):
            session.remove_cabinet(session.design.cabinets[0].id)

        assert renderer.renders > count
        assert len(session.design.cabinets) == 1

    def test_ceiling_edit(self, session: EditorSession) -> None:
        outcome = session.set_ceiling_height(200)

        assert outcome.status is EditStatus.APPLIED
        assert "Ceiling 200 cm" in session.svg
        assert session.design.cabinets[0].height == 200


class TestSelection:
    """Tests for selection handling."""

    def test_new_cabinet_is_selected(self, session: EditorSession) -> None:
        cabinet = session.add_cabinet(CabinetArchetype.SPLIT)

        assert session.selection == Selection(cabinet.id)
        assert "url(#glow)" in session.svg

    def test_new_accessory_is_selected(self, session: EditorSession) -> None:
        cabinet = session.design.cabinets[0]
        shelf = session.add_accessory(cabinet.id, AccessoryType.SHELF)
        assert session.selection == Selection(cabinet.id, shelf.id)

    def test_unknown_selection_is_refused(self, session: EditorSession) -> None:
        with pytest.raises(UnknownEntityError):
            session.select("missing")
        assert session.selection == Selection()

    def test_removing_selected_cabinet_clears_selection(self, session: EditorSession) -> None:
        cabinet = session.add_cabinet()
        session.remove_cabinet(cabinet.id)
        assert session.selection == Selection()

    def test_removing_selected_accessory_keeps_cabinet(self, session: EditorSession) -> None:
        cabinet = session.design.cabinets[0]
        shelf = session.add_accessory(cabinet.id, AccessoryType.SHELF)

        session.remove_accessory(cabinet.id, shelf.id)

        assert session.selection == Selection(cabinet.id)

    def test_select_at_pointer(self, session: EditorSession) -> None:
        first = session.design.cabinets[0]
        second = session.add_cabinet()

        assert session.select_at(100) is first
        assert session.select_at(300) is second
        assert session.selection == Selection(second.id)

    def test_select_at_gap_keeps_selection(self, session: EditorSession) -> None:
        first = session.design.cabinets[0]
        session.add_cabinet()
        session.select_at(100)

        assert session.select_at(256) is None
        assert session.select_at(10) is None
        assert session.selection == Selection(first.id)


class TestAccessoryEdits:
    """Edits through the session report their outcome."""

    def test_drawer_height_clamped(self, session: EditorSession) -> None:
        cabinet = session.design.cabinets[0]
        drawer = session.add_accessory(cabinet.id, AccessoryType.DRAWER)

        outcome = session.update_accessory(cabinet.id, drawer.id, "height", 500)

        assert outcome.status is EditStatus.ADJUSTED
        assert drawer.bottom <= cabinet.height


class TestImportExport:
    """Tests for replacing the design from a document."""

    def test_invalid_document_leaves_design_untouched(self, session: EditorSession) -> None:
        design = session.design
        svg = session.svg

        with pytest.raises(ParseError):
            session.import_document({"cabinets": []})

        assert session.design is design
        assert session.svg == svg

    def test_import_replaces_design(self, session: EditorSession, hallway_document) -> None:
        session.add_cabinet()

        design = session.import_document(hallway_document)

        assert session.design is design
        assert session.selection == Selection()
        assert "#1 Wardrobe" in session.svg

    def test_export_document(self, session: EditorSession) -> None:
        exported = session.export_document()
        assert exported["name"] == "Test design"
        assert len(exported["cabinets"]) == 1


class TestRenderRequests:
    """Tests for gating requests to the rendering service."""

    def test_request_payload(self, session: EditorSession) -> None:
        service = FakeRenderingService()
        environment = EnvironmentSettings(door_state=DoorState.OPEN)

        result = session.request_render(service, {"notes": "Matte finish"}, environment)

        assert result.image_data == b"\x89PNG fake"
        image, mime_type, prompt = service.calls[0]
        assert image.startswith(b"<svg")
        assert mime_type == "image/svg+xml"
        assert "Doors: shown open" in prompt
        assert prompt.endswith("Matte finish")
        assert session.render_in_flight is False

    def test_second_request_while_in_flight_is_refused(self, session: EditorSession) -> None:
        session.begin_render()

        with pytest.raises(RenderInProgressError):
            session.request_render(FakeRenderingService())

        session.end_render()
        session.request_render(FakeRenderingService())

    def test_service_failure_is_surfaced(self, session: EditorSession) -> None:
        service = FakeRenderingService(RenderingServiceError("quota exceeded"))

        with pytest.raises(RenderingServiceError, match="quota exceeded"):
            session.request_render(service)

        assert session.render_in_flight is False
        assert len(service.calls) == 1
