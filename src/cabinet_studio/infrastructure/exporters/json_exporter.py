"""JSON exporter writing the design document snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from cabinet_studio.application.document import dump_design
from cabinet_studio.infrastructure.exporters.base import DesignExporter, ExporterRegistry

if TYPE_CHECKING:
    from cabinet_studio.domain.entities import Design


@ExporterRegistry.register("json")
class JsonExporter(DesignExporter):
    """Writes the design document, loadable again with the importer."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    mime_type: ClassVar[str] = "application/json"

    def export_string(self, design: Design) -> str:
        return dump_design(design) + "\n"

    def export_bytes(self, design: Design) -> bytes:
        return self.export_string(design).encode("utf-8")
