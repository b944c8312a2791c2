"""Interactive editing session.

An :class:`EditorSession` owns the design being edited. Every mutation goes
through it, and the drawing is re-rendered in full right after each one,
whether the edit succeeded or not. The session also gates requests to the
rendering service so that at most one is outstanding.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from cabinet_studio.application.document import export_design, import_design
from cabinet_studio.application.prompt_compiler import compile_prompt
from cabinet_studio.contracts.dtos import RenderResult
from cabinet_studio.contracts.errors import RenderInProgressError
from cabinet_studio.contracts.protocols import ExporterProtocol, RenderingServiceProtocol
from cabinet_studio.domain.accessories import Accessory
from cabinet_studio.domain.editor import DesignEditor, EditOutcome
from cabinet_studio.domain.entities import Cabinet, Design, new_design
from cabinet_studio.domain.exceptions import UnknownEntityError
from cabinet_studio.domain.geometry import cabinet_at
from cabinet_studio.domain.value_objects import AccessoryType, CabinetArchetype, EnvironmentSettings
from cabinet_studio.infrastructure.exporters import JpegExporter
from cabinet_studio.infrastructure.scene_renderer import SceneRenderer, Selection

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RenderRequest:
    """Everything sent to the rendering service for one request."""

    image: bytes = field(repr=False)
    mime_type: str
    prompt: str


class EditorSession:
    """Single-writer editing session around one design.

    Attributes:
        renderer: Interactive renderer used for the on-screen drawing.
        encoder: Exporter producing the image sent to the rendering service.
        selection: Currently selected cabinet and accessory.
        svg: The most recent drawing.
    """

    def __init__(
        self,
        design: Design | None = None,
        renderer: SceneRenderer | None = None,
        encoder: ExporterProtocol | None = None,
    ) -> None:
        self._editor = DesignEditor(design or new_design())
        self.renderer = renderer or SceneRenderer(interactive=True)
        self.encoder = encoder or JpegExporter(
            SceneRenderer(scale=self.renderer.scale, interactive=False)
        )
        self.selection = Selection()
        self.svg = ""
        self._render_in_flight = False
        self.refresh()

    @property
    def design(self) -> Design:
        return self._editor.design

    @property
    def render_in_flight(self) -> bool:
        return self._render_in_flight

    def refresh(self) -> str:
        """Redraw the whole design."""
        self.svg = self.renderer.render(self.design, self.selection)
        return self.svg

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def apply(self, operation: Callable[[DesignEditor], T]) -> T:
        """Run an editor operation and redraw afterwards.

        Exceptions raised by the operation propagate after the redraw; the
        editor has already left the design unchanged in that case.
        """
        try:
            return operation(self._editor)
        finally:
            self._drop_stale_selection()
            self.refresh()

    def add_cabinet(self, archetype: CabinetArchetype | str = CabinetArchetype.TALL) -> Cabinet:
        cabinet = self.apply(lambda editor: editor.add_cabinet(archetype))
        self.select(cabinet.id)
        return cabinet

    def remove_cabinet(self, cabinet_id: str) -> Cabinet:
        return self.apply(lambda editor: editor.remove_cabinet(cabinet_id))

    def set_ceiling_height(self, value: float) -> EditOutcome:
        return self.apply(lambda editor: editor.set_ceiling_height(value))

    def add_accessory(self, cabinet_id: str, kind: AccessoryType | str) -> Accessory:
        accessory = self.apply(lambda editor: editor.add_accessory(cabinet_id, kind))
        self.select(cabinet_id, accessory.id)
        return accessory

    def remove_accessory(self, cabinet_id: str, accessory_id: str) -> Accessory:
        return self.apply(lambda editor: editor.remove_accessory(cabinet_id, accessory_id))

    def update_accessory(
        self, cabinet_id: str, accessory_id: str, field_name: str, value: Any
    ) -> EditOutcome:
        return self.apply(
            lambda editor: editor.update_accessory(cabinet_id, accessory_id, field_name, value)
        )

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, cabinet_id: str | None, accessory_id: str | None = None) -> None:
        """Select a cabinet and optionally one of its accessories.

        Raises:
            UnknownEntityError: If either identifier does not exist.
        """
        if cabinet_id is not None:
            cabinet = self.design.get_cabinet(cabinet_id)
            if accessory_id is not None:
                cabinet.get_accessory(accessory_id)
        elif accessory_id is not None:
            raise UnknownEntityError("accessory", accessory_id)
        self.selection = Selection(cabinet_id, accessory_id)
        self.refresh()

    def select_at(self, x: float) -> Cabinet | None:
        """Select the cabinet under pointer x.

        A pointer outside every cabinet leaves the selection as it is.
        """
        index = cabinet_at(self.design, x, self.renderer.scale)
        if index is None:
            return None
        cabinet = self.design.cabinets[index]
        self.select(cabinet.id)
        return cabinet

    def _drop_stale_selection(self) -> None:
        cabinet_id, accessory_id = self.selection.cabinet_id, self.selection.accessory_id
        if cabinet_id is None:
            return
        try:
            cabinet = self.design.get_cabinet(cabinet_id)
        except UnknownEntityError:
            self.selection = Selection()
            return
        if accessory_id is not None and all(a.id != accessory_id for a in cabinet.accessories):
            self.selection = Selection(cabinet_id)

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    def import_document(self, data: Any) -> Design:
        """Replace the design with an imported document.

        Raises:
            ParseError: If the document is invalid. The current design is
                left untouched.
        """
        design = import_design(data)
        self._editor = DesignEditor(design)
        self.selection = Selection()
        self.refresh()
        logger.info(f"Loaded design '{design.name}'")
        return design

    def export_document(self) -> dict[str, Any]:
        return export_design(self.design)

    # ------------------------------------------------------------------
    # Rendering service
    # ------------------------------------------------------------------

    def begin_render(
        self,
        vendor_specs: Mapping[str, str] | None = None,
        environment: EnvironmentSettings | None = None,
    ) -> RenderRequest:
        """Mark a render request as outstanding and build its payload.

        Raises:
            RenderInProgressError: If a request is already outstanding.
        """
        if self._render_in_flight:
            raise RenderInProgressError("A rendering request is already in progress")
        self._render_in_flight = True
        try:
            return RenderRequest(
                image=self.encoder.export_bytes(self.design),
                mime_type=self.encoder.mime_type,
                prompt=compile_prompt(self.design, vendor_specs, environment),
            )
        except Exception:
            self._render_in_flight = False
            raise

    def end_render(self) -> None:
        self._render_in_flight = False

    def request_render(
        self,
        service: RenderingServiceProtocol,
        vendor_specs: Mapping[str, str] | None = None,
        environment: EnvironmentSettings | None = None,
    ) -> RenderResult:
        """Send the current drawing and prompt to the rendering service.

        Raises:
            RenderInProgressError: If a request is already outstanding.
            RenderingServiceError: If the service fails. Not retried.
        """
        request = self.begin_render(vendor_specs, environment)
        try:
            return service.render(request.image, request.mime_type, request.prompt)
        finally:
            self.end_render()
