"""
Domain mappers package.
Handles transformation between MongoDB documents and DTOs (Data Transfer Objects).
"""

from domain.mappers.menu_mapper import MenuMapper

__all__ = ["MenuMapper"]
