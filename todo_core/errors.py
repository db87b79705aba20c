from typing import Any, Optional


class StoreError(Exception):
    """Base class for every error raised by the store layer."""


class ValidationError(StoreError):
    """Input rejected before it reached the database."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class IntegrityError(StoreError):
    """A database constraint was violated (at flush or at commit)."""


class ReferentialError(IntegrityError):
    """A deleted row is still referenced when the transaction commits."""


class NotFound(StoreError):
    def __init__(self, entity: str, id: Any):
        super().__init__(f"{entity} not found, id is {id}")
        self.entity = entity
        self.id = id
