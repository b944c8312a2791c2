"""Infrastructure layer - rendering, exporters and reference collaborators."""

from cabinet_studio.infrastructure.material_catalog import DirectoryMaterialCatalog
from cabinet_studio.infrastructure.repository import JsonDesignRepository
from cabinet_studio.infrastructure.scene_renderer import SceneRenderer, Selection

__all__ = [
    "DirectoryMaterialCatalog",
    "JsonDesignRepository",
    "SceneRenderer",
    "Selection",
]
