"""Design persistence as one JSON file per design."""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from cabinet_studio.contracts.dtos import StoredDesign
from cabinet_studio.contracts.errors import DesignNotFoundError, UnreadableDesignError

logger = logging.getLogger(__name__)

_META_KEYS = ("id", "created_at", "updated_at")


class JsonDesignRepository:
    """Stores design documents as ``<id>.json`` files in a directory.

    Each file holds the exported document plus ``id``, ``created_at`` and
    ``updated_at``. The directory is created on first save.

    Attributes:
        directory: Directory holding the design files.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def _path(self, design_id: str) -> Path:
        # Ids come from callers; keep them from escaping the directory.
        if not design_id or "/" in design_id or "\\" in design_id or design_id.startswith("."):
            raise DesignNotFoundError(design_id)
        return self.directory / f"{design_id}.json"

    def save_design(self, document: dict[str, Any], design_id: str | None = None) -> str:
        now = datetime.now(timezone.utc)
        design_id = design_id or uuid.uuid4().hex
        path = self._path(design_id)

        created_at = now
        if path.exists():
            try:
                created_at = self._read(path).created_at
            except UnreadableDesignError as e:
                logger.warning(f"Overwriting {e}")

        stored = StoredDesign(
            id=design_id,
            document={k: v for k, v in document.items() if k not in _META_KEYS},
            created_at=created_at,
            updated_at=now,
        )
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(stored.to_dict(), indent=2) + "\n", encoding="utf-8")
        logger.info(f"Saved design {design_id} to {path}")
        return design_id

    def load_design(self, design_id: str) -> StoredDesign:
        path = self._path(design_id)
        if not path.exists():
            raise DesignNotFoundError(design_id)
        return self._read(path)

    def list_designs(self) -> list[StoredDesign]:
        if not self.directory.exists():
            return []
        designs: list[StoredDesign] = []
        for path in self.directory.glob("*.json"):
            try:
                designs.append(self._read(path))
            except UnreadableDesignError as e:
                logger.warning(f"Skipping {e}")
        return sorted(designs, key=lambda d: d.updated_at, reverse=True)

    def delete_design(self, design_id: str) -> None:
        path = self._path(design_id)
        if not path.exists():
            raise DesignNotFoundError(design_id)
        path.unlink()
        logger.info(f"Deleted design {design_id}")

    def _read(self, path: Path) -> StoredDesign:
        """Read a design file.

        Raises:
            UnreadableDesignError: If the file is not a stored design.
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return StoredDesign(
                id=data["id"],
                document={k: v for k, v in data.items() if k not in _META_KEYS},
                created_at=_timestamp(data["created_at"]),
                updated_at=_timestamp(data["updated_at"]),
            )
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise UnreadableDesignError(path.stem, f"{type(e).__name__}: {e}") from e


def _timestamp(value: str) -> datetime:
    stamp = datetime.fromisoformat(value)
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp
