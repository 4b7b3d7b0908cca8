"""Disk storage for uploaded menu images.

Blobs live as plain files in one directory, named by ``generate_blob_name``,
and are served read-only under ``/uploads``.
"""

import logging
import mimetypes
import re
import time
from pathlib import Path, PurePosixPath
from typing import Optional, Union
from uuid import uuid4

from app.exceptions import InvalidMediaType, StorageWriteFailed, UploadTooLarge

logger = logging.getLogger("menucatalog.blob_store")

DEFAULT_MAX_BYTES = 2 * 1024 * 1024
GENERIC_CONTENT_TYPES = {"", "application/octet-stream"}

_EXTENSION_RE = re.compile(r"^\.[A-Za-z0-9]{1,16}$")
_BLOB_REF_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def generate_blob_name(original_name: Optional[str]) -> str:
    """
    Build a collision-resistant file name that keeps the upload's extension.

    The name is a millisecond timestamp plus a random token, e.g.
    ``1718000000000-3f9a1c2b7d4e.png``. Extensions that are not a plain
    alphanumeric suffix are dropped.
    """
    suffix = PurePosixPath((original_name or "").replace("\\", "/")).suffix
    ext = suffix.lower() if _EXTENSION_RE.match(suffix) else ""
    return f"{int(time.time() * 1000)}-{uuid4().hex[:12]}{ext}"


def resolve_media_type(content_type: Optional[str], original_name: Optional[str]) -> str:
    """Declared MIME type, or the one guessed from the file name when the
    declared type is missing or generic."""
    declared = (content_type or "").split(";", 1)[0].strip().lower()
    if declared in GENERIC_CONTENT_TYPES and original_name:
        guessed, _ = mimetypes.guess_type(original_name)
        return (guessed or declared).lower()
    return declared


class BlobStore:
    """Stores image uploads in a directory created on first use."""

    def __init__(self, directory: Union[str, Path], max_bytes: int = DEFAULT_MAX_BYTES):
        self.directory = Path(directory)
        self.max_bytes = max_bytes

    def check(self, size: int, content_type: Optional[str], original_name: Optional[str]) -> str:
        """
        Reject uploads that are too large or not images.

        Returns:
            The effective MIME type

        Raises:
            UploadTooLarge: size exceeds ``max_bytes``
            InvalidMediaType: MIME type is not ``image/*``
        """
        if size > self.max_bytes:
            raise UploadTooLarge(
                f"Image exceeds the {self.max_bytes} byte limit",
                details={"max_bytes": self.max_bytes},
            )
        media_type = resolve_media_type(content_type, original_name)
        if not media_type.startswith("image/"):
            raise InvalidMediaType(
                f"Unsupported file type: {media_type or 'unknown'}; an image is required"
            )
        return media_type

    def store(self, data: bytes, original_name: Optional[str], content_type: Optional[str]) -> str:
        """
        Validate and write an uploaded image.

        Args:
            data: file contents
            original_name: client-supplied file name, used for its extension
            content_type: declared MIME type of the part

        Returns:
            The generated blob reference (file name inside the directory)

        Raises:
            UploadTooLarge, InvalidMediaType: before anything is written
            StorageWriteFailed: the file could not be written
        """
        self.check(len(data), content_type, original_name)
        blob_ref = generate_blob_name(original_name)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(self.directory / blob_ref, "xb") as fh:
                fh.write(data)
        except OSError as exc:
            logger.error("Failed to write blob %s: %s", blob_ref, exc)
            raise StorageWriteFailed("Failed to add item") from exc
        logger.info("Stored blob %s (%d bytes)", blob_ref, len(data))
        return blob_ref

    def path_for(self, blob_ref: str) -> Path:
        """On-disk path of a blob; rejects references that are not plain names."""
        if not blob_ref or not _BLOB_REF_RE.match(blob_ref):
            raise ValueError(f"Invalid blob reference: {blob_ref!r}")
        return self.directory / blob_ref

    def discard(self, blob_ref: str) -> bool:
        """Delete a stored blob. Returns False if it was already gone."""
        try:
            self.path_for(blob_ref).unlink()
        except FileNotFoundError:
            return False
        logger.info("Discarded blob %s", blob_ref)
        return True
