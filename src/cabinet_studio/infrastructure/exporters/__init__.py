"""Exporter framework for designs.

Registered exporters:
- svg: front-elevation drawing as SVG
- png: rasterized drawing
- jpeg: rasterized drawing, flattened onto the background color
- json: design document snapshot

Usage:
    from cabinet_studio.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    ExportManager(Path("out")).export_all(["svg", "json"], design, "kitchen")
"""

from cabinet_studio.infrastructure.exporters.base import (
    DesignExporter,
    ExporterRegistry,
    ExportManager,
)
from cabinet_studio.infrastructure.exporters.json_exporter import JsonExporter
from cabinet_studio.infrastructure.exporters.raster import JpegExporter, PngExporter
from cabinet_studio.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DesignExporter",
    "ExportManager",
    "ExporterRegistry",
    "JpegExporter",
    "JsonExporter",
    "PngExporter",
    "SvgExporter",
]
