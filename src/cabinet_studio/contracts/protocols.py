"""Service protocols for dependency injection.

The application layer talks to persistence, the material catalog, the
rendering service and the exporters only through these protocols, so each
can be replaced by a fake in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinet_studio.contracts.dtos import Material, RenderResult, StoredDesign
    from cabinet_studio.domain.entities import Design


@runtime_checkable
class DesignRepositoryProtocol(Protocol):
    """Persistence of exported design documents.

    Example:
        ```python
        repository = JsonDesignRepository(Path("designs"))
        design_id = repository.save_design(export_design(design))
        stored = repository.load_design(design_id)
        ```
    """

    def save_design(self, document: dict[str, Any], design_id: str | None = None) -> str:
        """Store a document.

        Args:
            document: Exported design document.
            design_id: Existing identifier to overwrite; a new one is
                generated when omitted.

        Returns:
            The identifier the document is stored under.
        """
        ...

    def load_design(self, design_id: str) -> StoredDesign:
        """Load a stored document.

        Raises:
            DesignNotFoundError: If no design has this identifier.
        """
        ...

    def list_designs(self) -> list[StoredDesign]:
        """List stored documents, most recently updated first."""
        ...

    def delete_design(self, design_id: str) -> None:
        """Delete a stored document.

        Raises:
            DesignNotFoundError: If no design has this identifier.
        """
        ...


@runtime_checkable
class MaterialCatalogProtocol(Protocol):
    """Catalog of material textures."""

    def list_materials(self, category: str | None = None) -> list[Material]:
        """List materials, optionally limited to one category."""
        ...


@runtime_checkable
class RenderingServiceProtocol(Protocol):
    """External service turning a line drawing into a realistic image."""

    def render(self, image: bytes, mime_type: str, prompt: str) -> RenderResult:
        """Render an image.

        Args:
            image: Encoded line drawing of the design.
            mime_type: MIME type of ``image``.
            prompt: Compiled text prompt.

        Returns:
            The generated image.

        Raises:
            RenderingServiceError: If the service reports any failure.
        """
        ...


@runtime_checkable
class ExporterProtocol(Protocol):
    """Converts a design into one export format.

    Attributes:
        format_name: Name used to select the exporter (e.g. "svg", "png").
        file_extension: File extension without leading dot.
        mime_type: MIME type of the exported content.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    mime_type: ClassVar[str]

    def export_bytes(self, design: Design) -> bytes:
        """Export a design to encoded bytes."""
        ...

    def export(self, design: Design, path: Path) -> None:
        """Export a design to a file."""
        ...
