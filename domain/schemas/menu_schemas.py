"""Pydantic schemas and validation for menu item documents."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.enums import MenuValidationFailure


class MenuItemCreate(BaseModel):
    """Validated fields for a new menu item."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    price: float
    category: str
    sub_category: Optional[str] = Field(default=None, alias="subCategory")
    rating: Optional[str] = None
    orders: int = 0


class MenuItem(BaseModel):
    """Menu item document as stored in MongoDB.

    Lenient on read so documents written by older clients (missing fields,
    null or non-string values) still load.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = ""
    price: Optional[float] = None
    category: str = ""
    sub_category: Optional[str] = Field(default=None, alias="subCategory")
    rating: Optional[str] = None
    orders: int = 0
    image_ref: str = Field(default="", alias="image")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return str(v)

    @field_validator("orders", mode="before")
    @classmethod
    def default_orders(cls, v):
        return coerce_orders(v)

    @field_validator("image_ref", mode="before")
    @classmethod
    def default_image(cls, v):
        return str(v) if v else ""

    @field_validator("name", "category", mode="before")
    @classmethod
    def null_text_to_empty(cls, v):
        return "" if v is None else str(v)

    @field_validator("price", mode="before")
    @classmethod
    def lenient_price(cls, v):
        return _coerce_price(v)

    @field_validator("rating", "sub_category", mode="before")
    @classmethod
    def optional_as_text(cls, v):
        return None if v is None else str(v)


class MenuItemResponse(BaseModel):
    """Menu item as returned by GET /menu, with the image resolved to a URL."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: Optional[float] = None
    category: str
    sub_category: Optional[str] = Field(default=None, alias="subCategory")
    rating: Optional[str] = None
    orders: int = 0
    image: str = Field("", description="Absolute image URL, empty when no image")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class MenuItemCreatedResponse(BaseModel):
    """Confirmation returned by POST /menu"""

    message: str
    id: str


@dataclass(frozen=True)
class MenuValidationResult:
    """Outcome of validate_menu_fields: either a record or a failure."""

    record: Optional[MenuItemCreate] = None
    failure: Optional[MenuValidationFailure] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = value.strip() if isinstance(value, str) else str(value).strip()
    return text or None


def _coerce_price(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    return price if math.isfinite(price) else None


def coerce_orders(value: Any) -> int:
    """Return ``value`` as an order count, or 0 when absent or not numeric."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return int(number)


def validate_menu_fields(fields: Mapping[str, Any]) -> MenuValidationResult:
    """
    Check submitted menu fields and normalize them.

    Required: name, price, category. Blank strings count as missing.
    ``orders`` silently falls back to 0 when it is absent or not numeric.

    Args:
        fields: raw values keyed by wire name (name, price, category,
            subCategory, rating, orders)

    Returns:
        MenuValidationResult with ``record`` set on success, or ``failure``
        and ``message`` describing the first problem found
    """
    name = _clean_text(fields.get("name"))
    if name is None:
        return MenuValidationResult(
            failure=MenuValidationFailure.MISSING_NAME, message="name is required"
        )

    raw_price = fields.get("price")
    if _clean_text(raw_price) is None:
        return MenuValidationResult(
            failure=MenuValidationFailure.MISSING_PRICE, message="price is required"
        )
    price = _coerce_price(raw_price.strip() if isinstance(raw_price, str) else raw_price)
    if price is None:
        return MenuValidationResult(
            failure=MenuValidationFailure.INVALID_PRICE,
            message="price must be a number",
        )

    category = _clean_text(fields.get("category"))
    if category is None:
        return MenuValidationResult(
            failure=MenuValidationFailure.MISSING_CATEGORY,
            message="category is required",
        )

    record = MenuItemCreate(
        name=name,
        price=price,
        category=category,
        sub_category=_clean_text(fields.get("subCategory")),
        rating=_clean_text(fields.get("rating")),
        orders=coerce_orders(fields.get("orders")),
    )
    return MenuValidationResult(record=record)
