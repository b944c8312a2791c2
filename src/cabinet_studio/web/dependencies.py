"""FastAPI dependency injection for cabinet-studio services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cabinet_studio.application.factory import ServiceFactory
from cabinet_studio.contracts.protocols import DesignRepositoryProtocol


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance with default settings."""
    return ServiceFactory()


def get_repository(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> DesignRepositoryProtocol:
    """Dependency for the design repository."""
    return factory.get_repository()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
RepositoryDep = Annotated[DesignRepositoryProtocol, Depends(get_repository)]
