"""Data carried across the collaborator boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Material:
    """A texture from the material catalog.

    The design references materials by ``name`` only and never checks that
    a name exists in the catalog.

    Attributes:
        id: Catalog identifier.
        name: Display name, used in the design's material assignments.
        category: Catalog category, ``other`` when unknown.
        image_data: Encoded texture image.
        mime_type: MIME type of ``image_data``.
    """

    id: str
    name: str
    category: str
    image_data: bytes = field(repr=False)
    mime_type: str = "image/jpeg"


@dataclass(frozen=True)
class RenderResult:
    """Image returned by the rendering service."""

    image_data: bytes = field(repr=False)
    mime_type: str = "image/png"


@dataclass
class StoredDesign:
    """A design document as kept by a repository.

    Attributes:
        id: Repository identifier.
        document: Exported design document.
        created_at: When the design was first saved.
        updated_at: When the design was last saved.
    """

    id: str
    document: dict[str, Any]
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.document,
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
