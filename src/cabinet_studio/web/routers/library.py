"""Endpoints for designs stored in the repository."""

from fastapi import APIRouter, status

from cabinet_studio.application.document import export_design, import_design
from cabinet_studio.contracts.dtos import StoredDesign
from cabinet_studio.web.dependencies import RepositoryDep
from cabinet_studio.web.schemas import DesignRequest, SavedDesignSchema, StoredDesignSchema

router = APIRouter(prefix="/library", tags=["library"])


def _schema(stored: StoredDesign) -> StoredDesignSchema:
    return StoredDesignSchema(
        id=stored.id,
        created_at=stored.created_at.isoformat(),
        updated_at=stored.updated_at.isoformat(),
        design=stored.document,
    )


@router.get("", response_model=list[StoredDesignSchema])
async def list_designs(repository: RepositoryDep) -> list[StoredDesignSchema]:
    """List stored designs, most recently updated first."""
    return [_schema(stored) for stored in repository.list_designs()]


@router.post("", response_model=SavedDesignSchema, status_code=status.HTTP_201_CREATED)
async def save_design(request: DesignRequest, repository: RepositoryDep) -> SavedDesignSchema:
    """Validate and store a new design."""
    design = import_design(request.design)
    return SavedDesignSchema(id=repository.save_design(export_design(design)))


@router.put("/{design_id}", response_model=SavedDesignSchema)
async def update_design(
    design_id: str, request: DesignRequest, repository: RepositoryDep
) -> SavedDesignSchema:
    """Validate and overwrite a stored design."""
    repository.load_design(design_id)
    design = import_design(request.design)
    return SavedDesignSchema(id=repository.save_design(export_design(design), design_id))


@router.get("/{design_id}", response_model=StoredDesignSchema)
async def load_design(design_id: str, repository: RepositoryDep) -> StoredDesignSchema:
    """Load a stored design."""
    return _schema(repository.load_design(design_id))


@router.delete("/{design_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_design(design_id: str, repository: RepositoryDep) -> None:
    """Delete a stored design."""
    repository.delete_design(design_id)
