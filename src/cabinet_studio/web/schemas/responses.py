"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CabinetSummarySchema(BaseModel):
    """Summary of one cabinet."""

    id: str
    name: str
    archetype: str
    width: float = Field(..., description="Width in cm")
    height: float = Field(..., description="Height in cm")
    accessories: str = Field(..., description="Accessory counts, e.g. '2 drawers, 1 shelf'")


class ValidationResponse(BaseModel):
    """Response for design validation."""

    is_valid: bool = True
    name: str
    total_width: float = Field(..., description="Sum of cabinet widths in cm")
    cabinets: list[CabinetSummarySchema] = Field(default_factory=list)
    design: dict[str, Any] = Field(..., description="Migrated and normalized document")


class PromptResponse(BaseModel):
    """Response with the compiled rendering prompt."""

    prompt: str


class EditOutcomeSchema(BaseModel):
    """How an edit request was honored."""

    status: str
    field: str
    requested: Any = None
    applied: Any = None
    message: str = ""


class EditResponse(BaseModel):
    """Response for an edit, with the resulting document."""

    design: dict[str, Any]
    outcome: EditOutcomeSchema | None = None
    created_id: str | None = Field(default=None, description="Id of a created entity")


class ExportFormatsSchema(BaseModel):
    """Available export formats."""

    formats: list[str]


class StoredDesignSchema(BaseModel):
    """A design kept in the library."""

    id: str
    created_at: str
    updated_at: str
    design: dict[str, Any]


class SavedDesignSchema(BaseModel):
    """Response after saving a design."""

    id: str
