"""Domain exceptions."""


class CabinetStudioError(Exception):
    """Base class for errors surfaced to the user."""


class StructuralInvariantError(CabinetStudioError):
    """Raised when an edit would break a structural invariant of the design.

    Examples are removing the last cabinet or adding a drawer to a cabinet
    whose column has no free vertical space left. The design is unchanged
    when this is raised.
    """


class UnknownEntityError(CabinetStudioError, KeyError):
    """Raised when a cabinet or accessory identifier does not exist."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"Unknown {kind}: {entity_id}")

    def __str__(self) -> str:
        return f"Unknown {self.kind}: {self.entity_id}"


class InvalidFieldError(CabinetStudioError, ValueError):
    """Raised when an edit names a field the cabinet or accessory does not have."""
