from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (ids, field errors)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
        error_code: machine-readable category used in API error envelopes
    """

    http_status = 500
    error_code = "SERVICE_ERROR"
    default_message = "Service error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    error_code = "SERVICE_VALIDATION_ERROR"
    default_message = "Invalid input"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found (meal plan, list, item)."""

    http_status = 404
    error_code = "NOT_FOUND"
    default_message = "Not found"


class InvalidReferenceError(ServiceError):
    """Raised when stored data points at a recipe or ingredient that no longer exists."""

    http_status = 422
    error_code = "INVALID_REFERENCE"
    default_message = "Invalid reference"


class StoreFailureError(ServiceError):
    """Raised when the persistence layer fails to commit a write atomically."""

    http_status = 503
    error_code = "STORE_FAILURE"
    default_message = "Store failure"
