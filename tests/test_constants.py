"""
Realistic test constants for the menu catalog test suite.
"""

# =============================================================================
# MENU ITEMS
# =============================================================================

TEA = {"name": "Tea", "price": 10, "category": "Drinks"}

MASALA_DOSA = {
    "name": "Masala Dosa",
    "price": "120",
    "category": "Breakfast",
    "subCategory": "South Indian",
    "rating": "4.5",
    "orders": "37",
}

PANEER_TIKKA = {
    "name": "Paneer Tikka",
    "price": "249.50",
    "category": "Starters",
    "subCategory": "Tandoor",
}

# =============================================================================
# FILES
# =============================================================================

# Smallest byte sequence that still starts like a PNG
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32

TWO_MIB = 2 * 1024 * 1024
