"""Errors raised at the boundaries to external collaborators."""

from cabinet_studio.domain.exceptions import CabinetStudioError


class RenderingServiceError(CabinetStudioError):
    """Raised when the rendering service reports a failure.

    The message comes from the service and is shown to the user verbatim.
    Requests are never retried automatically.
    """


class RenderInProgressError(CabinetStudioError):
    """Raised when a render is requested while another one is outstanding."""


class DesignNotFoundError(CabinetStudioError, KeyError):
    """Raised when a stored design does not exist."""

    def __init__(self, design_id: str) -> None:
        self.design_id = design_id
        super().__init__(design_id)

    def __str__(self) -> str:
        return f"Design not found: {self.design_id}"


class UnreadableDesignError(DesignNotFoundError):
    """Raised when a stored design file exists but cannot be read back."""

    def __init__(self, design_id: str, reason: str) -> None:
        self.reason = reason
        super().__init__(design_id)

    def __str__(self) -> str:
        return f"Design file is unreadable: {self.design_id} ({self.reason})"
