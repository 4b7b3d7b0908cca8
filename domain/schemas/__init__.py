"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.menu_schemas import (
    MenuItemCreate,
    MenuItem,
    MenuItemResponse,
    MenuItemCreatedResponse,
    MenuValidationResult,
    validate_menu_fields,
    coerce_orders,
)

__all__ = [
    "MenuItemCreate",
    "MenuItem",
    "MenuItemResponse",
    "MenuItemCreatedResponse",
    "MenuValidationResult",
    "validate_menu_fields",
    "coerce_orders",
]
