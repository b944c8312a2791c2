"""Contracts module - protocols, DTOs and errors shared across layers."""

from .dtos import (
    Material as Material,
    RenderResult as RenderResult,
    StoredDesign as StoredDesign,
)
from .errors import (
    DesignNotFoundError as DesignNotFoundError,
    RenderingServiceError as RenderingServiceError,
    RenderInProgressError as RenderInProgressError,
    UnreadableDesignError as UnreadableDesignError,
)
from .protocols import (
    DesignRepositoryProtocol as DesignRepositoryProtocol,
    ExporterProtocol as ExporterProtocol,
    MaterialCatalogProtocol as MaterialCatalogProtocol,
    RenderingServiceProtocol as RenderingServiceProtocol,
)

__all__ = [
    "DesignNotFoundError",
    "DesignRepositoryProtocol",
    "ExporterProtocol",
    "Material",
    "MaterialCatalogProtocol",
    "RenderInProgressError",
    "RenderResult",
    "RenderingServiceError",
    "RenderingServiceProtocol",
    "StoredDesign",
    "UnreadableDesignError",
]
