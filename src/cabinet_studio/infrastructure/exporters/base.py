"""Base exporter framework with Registry and Manager."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cabinet_studio.infrastructure.scene_renderer import SceneRenderer

if TYPE_CHECKING:
    from cabinet_studio.contracts.protocols import ExporterProtocol
    from cabinet_studio.domain.entities import Design


logger = logging.getLogger(__name__)


class DesignExporter:
    """Common base for exporters.

    Image exporters draw the design with a non-interactive
    :class:`SceneRenderer`, so exported drawings match the editor exactly.

    Attributes:
        renderer: Renderer used for image formats.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    mime_type: ClassVar[str]

    def __init__(self, renderer: SceneRenderer | None = None) -> None:
        self.renderer = renderer or SceneRenderer()

    def export_bytes(self, design: Design) -> bytes:
        raise NotImplementedError

    def export(self, design: Design, path: Path) -> None:
        """Export a design to a file, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.export_bytes(design))


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("svg")
        class SvgExporter(DesignExporter):
            ...
    """

    _exporters: ClassVar[dict[str, type[ExporterProtocol]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[ExporterProtocol]) -> type[ExporterProtocol]:
            if format_name in cls._exporters:
                logger.warning(f"Overwriting existing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[ExporterProtocol]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports a design to one or more formats in an output directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
        renderer: Renderer handed to every exporter.
    """

    def __init__(self, output_dir: Path, renderer: SceneRenderer | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.renderer = renderer or SceneRenderer()

    def create(self, format_name: str) -> ExporterProtocol:
        """Instantiate the exporter registered for ``format_name``."""
        return ExporterRegistry.get(format_name)(renderer=self.renderer)

    def export_all(
        self,
        formats: list[str],
        design: Design,
        project_name: str = "design",
    ) -> dict[str, Path]:
        """Export a design to several formats.

        Files are named ``{project_name}.{ext}``.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        exporters = [(name, self.create(name)) for name in formats]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter in exporters:
            filepath = self.output_dir / f"{project_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(design, filepath)
            results[format_name] = filepath
        return results

    def export_single(
        self, format_name: str, design: Design, project_name: str = "design"
    ) -> Path:
        """Export a design to a single format."""
        return self.export_all([format_name], design, project_name)[format_name]
