"""Services package - Business logic layer"""

from services.menu_service import MenuService, ImageUpload, resolve_image_url

__all__ = [
    "MenuService",
    "ImageUpload",
    "resolve_image_url",
]
