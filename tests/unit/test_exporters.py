"""Tests for the exporter registry, exporters and the service factory."""

from pathlib import Path

import pytest

from cabinet_studio.application.document import parse_design
from cabinet_studio.application.factory import ServiceFactory
from cabinet_studio.application.session import EditorSession
from cabinet_studio.application.settings import DrawingSettings, RenderDefaults, StudioSettings
from cabinet_studio.contracts import ExporterProtocol
from cabinet_studio.domain import Design
from cabinet_studio.infrastructure.exporters import (
    ExporterRegistry,
    ExportManager,
    JpegExporter,
    JsonExporter,
    PngExporter,
    SvgExporter,
)
from cabinet_studio.infrastructure.scene_renderer import SceneRenderer


def _cairo_available() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


requires_cairo = pytest.mark.skipif(not _cairo_available(), reason="cairo library not installed")


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["jpeg", "json", "png", "svg"]

    def test_get(self) -> None:
        assert ExporterRegistry.get("svg") is SvgExporter
        assert ExporterRegistry.is_registered("json")
        assert not ExporterRegistry.is_registered("dxf")

    def test_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="Available formats: jpeg, json, png, svg"):
            ExporterRegistry.get("dxf")

    @pytest.mark.parametrize("exporter_class", [SvgExporter, PngExporter, JpegExporter, JsonExporter])
    def test_exporters_implement_protocol(self, exporter_class) -> None:
        assert isinstance(exporter_class(), ExporterProtocol)


class TestTextExporters:
    """Tests for the SVG and JSON exporters."""

    def test_svg_matches_renderer(self, furnished_design: Design) -> None:
        renderer = SceneRenderer()
        exporter = SvgExporter(renderer)
        assert exporter.export_string(furnished_design) == renderer.render(furnished_design)

    def test_json_loads_back(self, furnished_design: Design) -> None:
        text = JsonExporter().export_string(furnished_design)
        assert parse_design(text) == furnished_design

    def test_export_to_file(self, furnished_design: Design, tmp_path: Path) -> None:
        path = tmp_path / "out" / "kitchen.svg"
        SvgExporter().export(furnished_design, path)
        assert path.read_text(encoding="utf-8").startswith("<svg")


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all(self, furnished_design: Design, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path)
        results = manager.export_all(["svg", "json"], furnished_design, "kitchen")

        assert results == {"svg": tmp_path / "kitchen.svg", "json": tmp_path / "kitchen.json"}
        assert all(path.exists() for path in results.values())

    def test_unknown_format_writes_nothing(self, furnished_design: Design, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path / "out")
        with pytest.raises(KeyError):
            manager.export_all(["svg", "dxf"], furnished_design)
        assert not (tmp_path / "out").exists()


@requires_cairo
class TestRasterExporters:
    """Tests for PNG and JPEG output."""

    def test_png(self, design: Design) -> None:
        assert PngExporter().export_bytes(design).startswith(b"\x89PNG")

    def test_jpeg(self, design: Design) -> None:
        assert JpegExporter(quality=80).export_bytes(design).startswith(b"\xff\xd8")


class TestServiceFactory:
    """Tests for ServiceFactory."""

    def test_renderer_uses_drawing_settings(self) -> None:
        factory = ServiceFactory(StudioSettings(drawing=DrawingSettings(scale=2)))
        renderer = factory.get_renderer()

        assert renderer.scale.scale == 2
        assert renderer.interactive is False
        assert factory.get_renderer() is renderer
        assert factory.create_interactive_renderer().interactive is True

    def test_jpeg_quality_from_settings(self) -> None:
        factory = ServiceFactory(StudioSettings(render=RenderDefaults(jpeg_quality=70)))
        exporter = factory.create_exporter("jpeg")

        assert isinstance(exporter, JpegExporter)
        assert exporter.quality == 70

    def test_unknown_exporter(self) -> None:
        with pytest.raises(KeyError):
            ServiceFactory().create_exporter("dxf")

    def test_repository_and_catalog_use_settings(self, tmp_path: Path) -> None:
        factory = ServiceFactory(
            StudioSettings(storage_dir=tmp_path / "designs", texture_dir=tmp_path / "textures")
        )

        assert factory.get_repository().directory == tmp_path / "designs"
        assert factory.get_repository() is factory.get_repository()
        assert factory.get_material_catalog().list_materials() == []

    def test_create_session(self, design: Design) -> None:
        session = ServiceFactory().create_session(design)

        assert isinstance(session, EditorSession)
        assert session.design is design
        assert session.renderer.interactive is True

    def test_export_manager(self, tmp_path: Path, design: Design) -> None:
        manager = ServiceFactory().create_export_manager(tmp_path)
        assert manager.export_single("svg", design).name == "design.svg"
