"""Material catalog backed by a directory of texture images.

File names follow ``<name>-<category>.<ext>``, e.g. ``white-oak-wood.jpg`` is
the material "white oak" in category "wood". Files without a dash belong to
the ``other`` category.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cabinet_studio.contracts.dtos import Material

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "other"

_MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
}


def parse_texture_name(stem: str) -> tuple[str, str]:
    """Split a texture file stem into (material name, category).

    Examples:
        >>> parse_texture_name("white-oak-wood")
        ('white oak', 'wood')
        >>> parse_texture_name("concrete")
        ('concrete', 'other')
    """
    name, sep, category = stem.rpartition("-")
    if not sep or not name or not category:
        return stem.replace("_", " "), DEFAULT_CATEGORY
    return name.replace("-", " ").replace("_", " "), category.lower()


class DirectoryMaterialCatalog:
    """Lists the textures in a directory as materials.

    Attributes:
        directory: Directory scanned for texture images.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def list_materials(self, category: str | None = None) -> list[Material]:
        if not self.directory.is_dir():
            logger.debug(f"Texture directory {self.directory} does not exist")
            return []

        materials: list[Material] = []
        for path in sorted(self.directory.iterdir()):
            mime_type = _MIME_TYPES.get(path.suffix.lower())
            if mime_type is None or not path.is_file():
                continue
            name, material_category = parse_texture_name(path.stem)
            if category is not None and material_category != category.lower():
                continue
            materials.append(
                Material(
                    id=path.stem,
                    name=name,
                    category=material_category,
                    image_data=path.read_bytes(),
                    mime_type=mime_type,
                )
            )
        return materials
