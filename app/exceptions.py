from typing import Any, Mapping, Optional


class MenuCatalogError(Exception):
    """Base class for errors raised by the menu catalog.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal error", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ValidationFailed(MenuCatalogError):
    """Raised when a menu item is missing a required field or carries a bad value.

    ``reason`` holds the MenuValidationFailure member that caused the rejection.
    """

    http_status = 400
    default_code = "VALIDATION_FAILED"

    def __init__(self, message: str = "Invalid input", reason=None, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details=details)
        self.reason = reason
        if reason is not None:
            self.code = f"VALIDATION_FAILED_{reason.name}"


class InvalidMediaType(MenuCatalogError):
    """Raised when an upload does not declare an image MIME type."""

    http_status = 415
    default_code = "INVALID_MEDIA_TYPE"


class UploadTooLarge(MenuCatalogError):
    """Raised when an upload exceeds the configured size limit."""

    http_status = 413
    default_code = "UPLOAD_TOO_LARGE"


class StorageWriteFailed(MenuCatalogError):
    """Raised when an uploaded blob could not be written to disk."""

    http_status = 500
    default_code = "STORAGE_WRITE_FAILED"


class RepositoryUnavailable(MenuCatalogError):
    """Raised when MongoDB cannot serve a read or write after startup."""

    http_status = 503
    default_code = "REPOSITORY_UNAVAILABLE"


class ConnectionFailed(MenuCatalogError):
    """Raised at startup when MongoDB is unreachable or not configured. Fatal."""

    default_code = "CONNECTION_FAILED"
