"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    MenuCatalogError,
    ValidationFailed,
    InvalidMediaType,
    UploadTooLarge,
    StorageWriteFailed,
    RepositoryUnavailable,
    ConnectionFailed,
)

__all__ = [
    "settings",
    "MenuCatalogError",
    "ValidationFailed",
    "InvalidMediaType",
    "UploadTooLarge",
    "StorageWriteFailed",
    "RepositoryUnavailable",
    "ConnectionFailed",
]
