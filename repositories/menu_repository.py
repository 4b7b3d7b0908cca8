"""
Menu Repository - Data access layer for menu items (MongoDB)
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.exceptions import RepositoryUnavailable, ValidationFailed
from domain.mappers.menu_mapper import MenuMapper
from domain.schemas.menu_schemas import MenuItem, validate_menu_fields

logger = logging.getLogger("menucatalog.repositories.menu")


def _utcnow() -> datetime:
    # BSON dates keep millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class MenuRepository:
    """
    Repository for menu items stored in a MongoDB collection.
    The collection is injected so tests and the app can supply their own.
    """

    def __init__(self, collection: Collection, clock: Optional[Callable[[], datetime]] = None):
        self.collection = collection
        self._clock = clock or _utcnow

    def create(self, fields: Mapping[str, Any]) -> MenuItem:
        """Validate and insert a new menu item.

        Args:
            fields: wire-named values (name, price, category, subCategory,
                rating, orders, image)

        Returns:
            The stored MenuItem with its assigned id and timestamps

        Raises:
            ValidationFailed: a required field is missing or malformed
            RepositoryUnavailable: MongoDB rejected or could not take the write
        """
        result = validate_menu_fields(fields)
        if not result.ok:
            raise ValidationFailed(result.message, reason=result.failure)

        doc = MenuMapper.to_document(result.record, fields.get("image") or "", self._clock())
        try:
            inserted = self.collection.insert_one(doc)
        except PyMongoError as exc:
            logger.error("Failed to insert menu item %r: %s", result.record.name, exc)
            raise RepositoryUnavailable("Failed to add item") from exc

        doc["_id"] = inserted.inserted_id
        logger.info("Created menu item %s (%s)", inserted.inserted_id, result.record.name)
        return MenuMapper.from_document(doc)

    def list_all(self) -> List[MenuItem]:
        """Return every menu item in natural (insertion) order."""
        try:
            docs = list(self.collection.find())
        except PyMongoError as exc:
            logger.error("Failed to fetch menu items: %s", exc)
            raise RepositoryUnavailable("Failed to fetch menu") from exc
        logger.debug("Fetched %d menu items", len(docs))
        return [MenuMapper.from_document(doc) for doc in docs]
