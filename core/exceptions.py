"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

from typing import Optional, Any, Dict, Iterable


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'User', 'Meal').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class PreconditionFailure(AppException):
    """Raised when body metrics required by a calculation are missing or invalid."""

    def __init__(self, fields: Iterable[str], message: Optional[str] = None):
        """Initialize precondition failure.

        Args:
            fields: Names of the inputs that are missing or invalid.
            message: Optional override for the default message.
        """
        self.fields = sorted(set(fields))
        message = message or "Missing or invalid body metrics: %s" % ", ".join(self.fields)
        super().__init__(message, status_code=400, details={"fields": self.fields})


class AuthenticationError(AppException):
    """Exception raised when credentials or tokens are missing or invalid."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, status_code=401)


class PermissionDenied(AppException):
    """Exception raised when the caller may not act on a resource."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, status_code=403)


class ConflictError(AppException):
    """Exception raised when a write would violate a uniqueness rule."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=409, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'create', 'update').
        """
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=500, details=details)
