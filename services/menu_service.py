"""
Menu service - lists and adds menu items, tying together blob storage,
the menu repository and image URL resolution.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from adapters.blob_store import BlobStore
from app.exceptions import MenuCatalogError, ValidationFailed
from domain.mappers.menu_mapper import MenuMapper
from domain.schemas.menu_schemas import MenuItem, MenuItemResponse, validate_menu_fields
from repositories.menu_repository import MenuRepository
from services.base_service import BaseService

UPLOADS_PATH = "/uploads"


def resolve_image_url(blob_ref: Optional[str], base_address: str) -> str:
    """
    Public URL of a stored image, or "" when there is none.

    >>> resolve_image_url("abc.png", "http://h")
    'http://h/uploads/abc.png'
    """
    if not blob_ref:
        return ""
    return f"{base_address.rstrip('/')}{UPLOADS_PATH}/{blob_ref}"


@dataclass
class ImageUpload:
    """An image file part received with a new menu item."""

    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None


class MenuService(BaseService):
    """Business logic for the menu catalog"""

    def __init__(self, repository: MenuRepository, blob_store: BlobStore, base_url: str):
        super().__init__("menucatalog.services.menu")
        self.repository = repository
        self.blob_store = blob_store
        self.base_url = base_url

    def list_menu(self) -> List[MenuItemResponse]:
        """All menu items with their image reference resolved to a URL."""
        items = self.repository.list_all()
        return [
            MenuMapper.to_response(item, resolve_image_url(item.image_ref, self.base_url))
            for item in items
        ]

    def add_item(self, fields: Mapping[str, Any], upload: Optional[ImageUpload] = None) -> MenuItem:
        """
        Store the optional image, then create the menu item.

        Fields are validated before the image is written so a rejected item
        never leaves a file behind. If the database write fails after the
        image was stored, the image is removed again (best effort).

        Raises:
            ValidationFailed: missing or malformed fields
            UploadTooLarge, InvalidMediaType: the image was rejected
            StorageWriteFailed: the image could not be written
            RepositoryUnavailable: the database write failed
        """
        result = validate_menu_fields(fields)
        if not result.ok:
            self.log_warning("menu_item_rejected", reason=result.failure.value)
            raise ValidationFailed(result.message, reason=result.failure)

        blob_ref = ""
        if upload is not None:
            blob_ref = self.blob_store.store(upload.data, upload.filename, upload.content_type)

        record_fields = {k: v for k, v in fields.items() if k != "image"}
        record_fields["image"] = blob_ref
        try:
            item = self.repository.create(record_fields)
        except MenuCatalogError:
            if blob_ref:
                self._discard_orphan(blob_ref)
            raise

        self.log_info("menu_item_added", id=item.id, image=blob_ref or "-")
        return item

    def _discard_orphan(self, blob_ref: str):
        try:
            self.blob_store.discard(blob_ref)
        except OSError as exc:
            self.log_error("orphan_blob_left", blob=blob_ref, error=exc)
