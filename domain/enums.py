"""
Domain enums for the menu catalog.
"""

import enum


class MenuValidationFailure(str, enum.Enum):
    """Reasons a submitted menu item is rejected"""

    MISSING_NAME = "missing_name"
    MISSING_PRICE = "missing_price"
    MISSING_CATEGORY = "missing_category"
    INVALID_PRICE = "invalid_price"
