"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinet_studio.application.document import ParseError
from cabinet_studio.contracts.errors import (
    DesignNotFoundError,
    RenderingServiceError,
    RenderInProgressError,
)
from cabinet_studio.domain.exceptions import (
    InvalidFieldError,
    StructuralInvariantError,
    UnknownEntityError,
)


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def _error(status_code: int, error: str, error_type: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "error_type": error_type, "details": details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
        return _error(422, exc.message, exc.error_type, exc.details or None)

    @app.exception_handler(StructuralInvariantError)
    async def structural_error_handler(
        request: Request, exc: StructuralInvariantError
    ) -> JSONResponse:
        return _error(409, str(exc), "structural")

    @app.exception_handler(InvalidFieldError)
    async def invalid_field_handler(request: Request, exc: InvalidFieldError) -> JSONResponse:
        return _error(422, str(exc), "invalid_field")

    @app.exception_handler(UnknownEntityError)
    async def unknown_entity_handler(request: Request, exc: UnknownEntityError) -> JSONResponse:
        return _error(404, str(exc), "not_found", [{"kind": exc.kind, "id": exc.entity_id}])

    @app.exception_handler(DesignNotFoundError)
    async def design_not_found_handler(
        request: Request, exc: DesignNotFoundError
    ) -> JSONResponse:
        return _error(404, str(exc), "not_found", [{"kind": "design", "id": exc.design_id}])

    @app.exception_handler(RenderInProgressError)
    async def render_in_progress_handler(
        request: Request, exc: RenderInProgressError
    ) -> JSONResponse:
        return _error(409, str(exc), "render_in_progress")

    @app.exception_handler(RenderingServiceError)
    async def rendering_service_handler(
        request: Request, exc: RenderingServiceError
    ) -> JSONResponse:
        return _error(502, str(exc), "rendering_service")

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return _error(
            400, str(exc), "unsupported_format", [{"available": exc.available}]
        )
