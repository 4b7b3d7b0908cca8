"""
Menu domain mappers.
Handles transformation between MongoDB documents and DTOs for menu items.
"""

from datetime import datetime
from typing import Any, Dict

from domain.schemas.menu_schemas import MenuItem, MenuItemCreate, MenuItemResponse


class MenuMapper:
    """Mapper for menu item transformations."""

    @staticmethod
    def to_document(record: MenuItemCreate, image_ref: str, now: datetime) -> Dict[str, Any]:
        """
        Build the MongoDB document for a validated menu item.

        Keys follow the wire names (subCategory, image, createdAt, updatedAt)
        so documents stay readable by other clients of the same collection.
        """
        return {
            "name": record.name,
            "price": record.price,
            "category": record.category,
            "subCategory": record.sub_category,
            "rating": record.rating,
            "orders": record.orders,
            "image": image_ref or "",
            "createdAt": now,
            "updatedAt": now,
        }

    @staticmethod
    def from_document(doc: Dict[str, Any]) -> MenuItem:
        return MenuItem.model_validate(doc)

    @staticmethod
    def to_response(item: MenuItem, image_url: str) -> MenuItemResponse:
        """
        Convert a stored MenuItem to its API representation.

        Args:
            item: stored menu item
            image_url: URL resolved from ``item.image_ref`` (empty when no image)

        Returns:
            MenuItemResponse DTO
        """
        return MenuItemResponse(
            id=item.id,
            name=item.name,
            price=item.price,
            category=item.category,
            sub_category=item.sub_category,
            rating=item.rating,
            orders=item.orders,
            image=image_url,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )
