"""Base exceptions for neo-catalog.

All exceptions inherit from CatalogError and carry an error code, structured
details and an HTTP status hint for whichever transport layer renders them.
"""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """Base exception for all neo-catalog errors."""

    http_status: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get the HTTP status hint for an exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 for anything outside the hierarchy
    """
    if isinstance(exception, CatalogError):
        return exception.http_status
    return 500


def create_error_response(exception: CatalogError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-catalog exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
