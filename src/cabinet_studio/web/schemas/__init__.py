"""Request and response schemas for the REST API."""

from cabinet_studio.web.schemas.requests import (
    AddAccessoryRequest,
    DesignRequest,
    EnvironmentSchema,
    PromptRequest,
    RemoveCabinetRequest,
    UpdateAccessoryRequest,
)
from cabinet_studio.web.schemas.responses import (
    CabinetSummarySchema,
    EditOutcomeSchema,
    EditResponse,
    ExportFormatsSchema,
    PromptResponse,
    SavedDesignSchema,
    StoredDesignSchema,
    ValidationResponse,
)

__all__ = [
    "AddAccessoryRequest",
    "CabinetSummarySchema",
    "DesignRequest",
    "EditOutcomeSchema",
    "EditResponse",
    "EnvironmentSchema",
    "ExportFormatsSchema",
    "PromptRequest",
    "PromptResponse",
    "RemoveCabinetRequest",
    "SavedDesignSchema",
    "StoredDesignSchema",
    "UpdateAccessoryRequest",
    "ValidationResponse",
]
