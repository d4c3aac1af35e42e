"""
Custom exceptions for the parcel store.

Provides standardized error codes so callers can tell a missing parcel
apart from a failing store.
"""

from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class StoreError(AppException):
    """Raised when a statement against the underlying store fails."""

    def __init__(self, operation: str, reason: str = "store operation failed"):
        super().__init__(
            message=f"{operation}: {reason}",
            error_code="ERR_STORE_001",
            details={"operation": operation}
        )


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when no parcel matches the requested number."""

    def __init__(self, number: int):
        self.number = number
        super().__init__("Parcel", number)
