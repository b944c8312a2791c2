"""SVG exporter for the front-elevation drawing."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from cabinet_studio.infrastructure.exporters.base import DesignExporter, ExporterRegistry

if TYPE_CHECKING:
    from cabinet_studio.domain.entities import Design


@ExporterRegistry.register("svg")
class SvgExporter(DesignExporter):
    """Writes the scene renderer's SVG output unchanged."""

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    mime_type: ClassVar[str] = "image/svg+xml"

    def export_string(self, design: Design) -> str:
        return self.renderer.render(design)

    def export_bytes(self, design: Design) -> bytes:
        return self.export_string(design).encode("utf-8")
