"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cabinet_studio.application.settings import StudioSettings

if TYPE_CHECKING:
    from pathlib import Path

    from cabinet_studio.application.session import EditorSession
    from cabinet_studio.contracts.protocols import (
        DesignRepositoryProtocol,
        ExporterProtocol,
        MaterialCatalogProtocol,
    )
    from cabinet_studio.domain.entities import Design
    from cabinet_studio.domain.value_objects import EnvironmentSettings, FloorFinish
    from cabinet_studio.infrastructure.exporters import ExportManager
    from cabinet_studio.infrastructure.scene_renderer import SceneRenderer


@dataclass
class ServiceFactory:
    """Creates services configured from :class:`StudioSettings`.

    Settings reach every service through this factory; nothing reads them
    from module globals. Collaborators are created lazily and cached.

    Example:
        ```python
        factory = ServiceFactory(load_settings(Path("studio.json")))
        svg = factory.get_renderer().render(design)
        ```
    """

    settings: StudioSettings = field(default_factory=StudioSettings)

    _renderer: "SceneRenderer | None" = field(default=None, init=False, repr=False)
    _repository: "DesignRepositoryProtocol | None" = field(default=None, init=False, repr=False)
    _catalog: "MaterialCatalogProtocol | None" = field(default=None, init=False, repr=False)

    def get_renderer(self) -> SceneRenderer:
        """Non-interactive renderer shared by all export paths."""
        if self._renderer is None:
            from cabinet_studio.infrastructure.scene_renderer import SceneRenderer

            self._renderer = SceneRenderer(scale=self.settings.scale_config())
        return self._renderer

    def create_interactive_renderer(self) -> SceneRenderer:
        from cabinet_studio.infrastructure.scene_renderer import SceneRenderer

        return SceneRenderer(scale=self.settings.scale_config(), interactive=True)

    def create_exporter(self, format_name: str) -> ExporterProtocol:
        """Create the exporter registered for ``format_name``.

        Raises:
            KeyError: If the format is not registered.
        """
        from cabinet_studio.infrastructure.exporters import ExporterRegistry, JpegExporter

        exporter_class = ExporterRegistry.get(format_name)
        if exporter_class is JpegExporter:
            return JpegExporter(self.get_renderer(), quality=self.settings.render.jpeg_quality)
        return exporter_class(renderer=self.get_renderer())

    def create_export_manager(self, output_dir: Path) -> ExportManager:
        from cabinet_studio.infrastructure.exporters import ExportManager

        return ExportManager(output_dir, renderer=self.get_renderer())

    def available_formats(self) -> list[str]:
        from cabinet_studio.infrastructure.exporters import ExporterRegistry

        return ExporterRegistry.available_formats()

    def get_repository(self) -> DesignRepositoryProtocol:
        if self._repository is None:
            from cabinet_studio.infrastructure.repository import JsonDesignRepository

            self._repository = JsonDesignRepository(self.settings.storage_dir)
        return self._repository

    def get_material_catalog(self) -> MaterialCatalogProtocol:
        if self._catalog is None:
            from cabinet_studio.infrastructure.material_catalog import (
                DirectoryMaterialCatalog,
            )

            self._catalog = DirectoryMaterialCatalog(self.settings.texture_dir)
        return self._catalog

    def create_session(self, design: Design | None = None) -> EditorSession:
        from cabinet_studio.application.session import EditorSession

        return EditorSession(
            design,
            renderer=self.create_interactive_renderer(),
            encoder=self.create_exporter("jpeg"),
        )

    def environment(self, floor: FloorFinish) -> EnvironmentSettings:
        return self.settings.environment(floor)
