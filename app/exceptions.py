from typing import Any, Mapping, Optional


class DailyDietError(Exception):
    """Base class for request-shaped failures raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Error"
    default_code = "ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(DailyDietError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class NotFoundError(DailyDietError):
    """Raised when a requested resource was not found.

    Also raised when the resource exists but belongs to another user, so the
    two cases cannot be told apart by the caller.
    """

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(DailyDietError):
    """Raised when a resource conflict occurs (e.g., duplicate email)."""

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"


class UnauthorizedError(DailyDietError):
    """Raised when a credential check fails or a token is missing, invalid or expired."""

    http_status = 401
    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"
