"""Raster exporters for the front-elevation drawing.

The SVG drawing is rasterized with cairosvg. JPEG output is produced from
the PNG with Pillow, flattening transparency onto the drawing's background
color since JPEG has no alpha channel.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, ClassVar

from PIL import Image

from cabinet_studio.infrastructure.exporters.base import DesignExporter, ExporterRegistry
from cabinet_studio.infrastructure.scene_renderer import BACKGROUND, SceneRenderer

if TYPE_CHECKING:
    from cabinet_studio.domain.entities import Design

logger = logging.getLogger(__name__)


@ExporterRegistry.register("png")
class PngExporter(DesignExporter):
    """Rasterizes the drawing to PNG.

    Attributes:
        pixel_ratio: Output pixels per drawing pixel.
    """

    format_name: ClassVar[str] = "png"
    file_extension: ClassVar[str] = "png"
    mime_type: ClassVar[str] = "image/png"

    def __init__(self, renderer: SceneRenderer | None = None, pixel_ratio: float = 1.0) -> None:
        super().__init__(renderer)
        self.pixel_ratio = pixel_ratio

    def export_bytes(self, design: Design) -> bytes:
        # cairosvg loads the native cairo library on import.
        import cairosvg

        svg = self.renderer.render(design)
        png = cairosvg.svg2png(bytestring=svg.encode("utf-8"), scale=self.pixel_ratio)
        logger.debug(f"Rasterized design '{design.name}' to {len(png)} bytes of PNG")
        return png


@ExporterRegistry.register("jpeg")
class JpegExporter(PngExporter):
    """Rasterizes the drawing to JPEG, the format sent to the rendering service.

    Attributes:
        quality: JPEG quality, 1-95.
    """

    format_name: ClassVar[str] = "jpeg"
    file_extension: ClassVar[str] = "jpg"
    mime_type: ClassVar[str] = "image/jpeg"

    def __init__(
        self,
        renderer: SceneRenderer | None = None,
        pixel_ratio: float = 1.0,
        quality: int = 90,
    ) -> None:
        super().__init__(renderer, pixel_ratio)
        self.quality = quality

    def export_bytes(self, design: Design) -> bytes:
        png = super().export_bytes(design)
        with Image.open(io.BytesIO(png)) as image:
            rgba = image.convert("RGBA")
            flattened = Image.new("RGB", rgba.size, BACKGROUND)
            flattened.paste(rgba, mask=rgba.getchannel("A"))
        buffer = io.BytesIO()
        flattened.save(buffer, format="JPEG", quality=self.quality)
        return buffer.getvalue()
