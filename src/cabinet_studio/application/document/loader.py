"""Import and export of design documents.

Import is all-or-nothing: the document is decoded, migrated, validated and
normalized into a brand new Design. Any failure raises :class:`ParseError`
and nothing outside this module is modified.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_studio.application.document.adapter import (
    design_to_document,
    document_to_design,
)
from cabinet_studio.application.document.migrations import migrate_document
from cabinet_studio.application.document.schema import DesignDocument
from cabinet_studio.domain.editor import DesignEditor
from cabinet_studio.domain.entities import Design
from cabinet_studio.domain.exceptions import CabinetStudioError, StructuralInvariantError

logger = logging.getLogger(__name__)


class ParseError(CabinetStudioError):
    """Raised when a design document cannot be imported.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, file_read_error,
            json_parse, validation, structural)
        path: Path to the document file (if applicable)
        details: Additional error details (line/column for JSON, validation
            errors with JSON paths, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> format_json_path(("cabinets", 0, "accessories", 2, "height"))
        'cabinets[0].accessories[2].height'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value dicts."""
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def format_validation_message(heading: str, details: list[dict[str, Any]]) -> str:
    """Format validation error details into a human-readable message."""
    lines = [heading]
    for detail in details:
        value = detail.get("value")
        # Whole objects make unreadable messages; only echo scalars.
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def validate_document(data: Any, path: Path | None = None) -> DesignDocument:
    """Migrate and validate decoded JSON into a DesignDocument.

    Raises:
        ParseError: With ``error_type="validation"`` if the data does not
            match the document schema.
    """
    migrated, _ = migrate_document(data)
    try:
        return DesignDocument.model_validate(migrated)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ParseError(
            message=format_validation_message("Design document validation failed:", details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def import_design(data: Any, path: Path | None = None) -> Design:
    """Build a new Design from decoded JSON.

    Args:
        data: Decoded JSON document, possibly in a legacy format.
        path: Source file, used in error messages.

    Returns:
        A new, normalized Design.

    Raises:
        ParseError: If the document is invalid or its drawers cannot be
            placed.
    """
    document = validate_document(data, path)
    design = document_to_design(document)
    try:
        DesignEditor(design).normalize()
    except StructuralInvariantError as e:
        raise ParseError(
            message=f"Design document is not buildable: {e}",
            error_type="structural",
            path=path,
        ) from e
    logger.debug(f"Imported design '{design.name}' with {len(design.cabinets)} cabinet(s)")
    return design


def parse_design(text: str, path: Path | None = None) -> Design:
    """Decode a JSON string and import it.

    Raises:
        ParseError: With ``error_type="json_parse"`` on invalid JSON, or any
            error raised by :func:`import_design`.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        where = f" {path}" if path else ""
        raise ParseError(
            message=f"Invalid JSON in design document{where} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return import_design(data, path)


def load_design_file(path: Path) -> Design:
    """Load a design from a JSON file.

    Raises:
        ParseError: If the file is missing, unreadable or not a valid design.
    """
    if not path.exists():
        raise ParseError(
            message=f"Design file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ParseError(
            message=f"Error reading design file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e
    return parse_design(content, path)


def export_design(design: Design) -> dict[str, Any]:
    """Snapshot a design as a JSON-compatible dict."""
    return design_to_document(design).model_dump(mode="json")


def dump_design(design: Design, indent: int = 2) -> str:
    """Serialize a design to a JSON string."""
    return json.dumps(export_design(design), indent=indent)


def save_design_file(design: Design, path: Path) -> None:
    """Write a design to a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_design(design) + "\n", encoding="utf-8")
    logger.info(f"Saved design '{design.name}' to {path}")
