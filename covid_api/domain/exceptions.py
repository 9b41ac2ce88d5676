"""Domain error taxonomy.

Repositories and entities raise these; services translate them into
ServiceResult errors and the HTTP layer into status codes.
"""
from typing import Optional


class DomainError(Exception):
    """Base class for all errors raised by the domain and storage layers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """A required field is missing after sanitization."""


class PayloadError(DomainError):
    """An inbound payload cannot be turned into an entity at all."""


class NotFoundError(DomainError):
    """No stored row matches the requested identifier."""

    def __init__(self, entity: str, identifier: Optional[str] = None):
        super().__init__("Error: No data found")
        self.entity = entity
        self.identifier = identifier


class StorageError(DomainError):
    """
    Underlying transaction or query failure.

    The driver exception is kept as ``__cause__`` so it can be logged in
    full while callers only see the generic message.
    """
