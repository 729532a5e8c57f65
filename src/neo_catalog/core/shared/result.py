"""Tagged success/failure result returned by catalog services."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from ..exceptions import (
    CatalogError,
    DuplicateSkuError,
    EntityNotFoundError,
    InvalidFilterError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories surfaced to callers."""
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_FILTER = "invalid_filter"
    PERSISTENCE_FAILURE = "persistence_failure"


_KIND_BY_ERROR = {
    EntityNotFoundError: ErrorKind.NOT_FOUND,
    DuplicateSkuError: ErrorKind.CONFLICT,
    InvalidFilterError: ErrorKind.INVALID_FILTER,
}


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service operation.

    A success carries ``data``; a failure carries a message, a kind and an
    optional list of individual validation errors. Services never raise
    through this boundary.
    """

    is_success: bool
    data: Optional[T] = None
    error_message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def success(cls, data: T) -> "Result[T]":
        return cls(is_success=True, data=data)

    @classmethod
    def failure(
        cls,
        message: str,
        kind: ErrorKind = ErrorKind.PERSISTENCE_FAILURE,
        errors: Optional[List[str]] = None,
    ) -> "Result[T]":
        return cls(
            is_success=False,
            error_message=message,
            error_kind=kind,
            errors=list(errors) if errors else [message],
        )

    @classmethod
    def from_error(cls, error: CatalogError) -> "Result[T]":
        """Map a catalog exception onto a failure result."""
        kind = ErrorKind.PERSISTENCE_FAILURE
        for error_type, mapped in _KIND_BY_ERROR.items():
            if isinstance(error, error_type):
                kind = mapped
                break
        errors = getattr(error, "errors", None)
        return cls.failure(error.message, kind, errors)

    @property
    def is_failure(self) -> bool:
        return not self.is_success
