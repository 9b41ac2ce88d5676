"""ServiceResult and ServiceError - the contract between services and adapters."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Outcome categories an adapter maps onto its own status codes."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PAYLOAD = "payload"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ServiceError:
    """Error payload within a ServiceResult."""
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ServiceResult:
    """
    Return type for every service operation.

    Attributes:
        success: Whether the operation succeeded
        data: Entity produced by the operation on success
        error: Typed error if ``success`` is False
    """
    success: bool
    data: Optional[Any] = None
    error: Optional[ServiceError] = None

    @classmethod
    def ok(cls, data: Any = None) -> "ServiceResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "ServiceResult":
        return cls(success=False, error=ServiceError(kind=kind, message=message))
