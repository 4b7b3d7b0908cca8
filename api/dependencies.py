"""
API dependencies for dependency injection
"""

from fastapi import Request

from adapters.blob_store import BlobStore
from app.config import Settings
from repositories.menu_repository import MenuRepository
from services.menu_service import MenuService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_menu_repository(request: Request) -> MenuRepository:
    """
    Menu repository built by the application lifespan.

    Usage:
        @router.get("/example")
        def example(repo: MenuRepository = Depends(get_menu_repository)):
            ...
    """
    return request.app.state.menu_repository


def get_blob_store(request: Request) -> BlobStore:
    return request.app.state.blob_store


def get_menu_service(request: Request) -> MenuService:
    """MenuService wired with the repository and blob store kept on app.state."""
    return MenuService(
        repository=get_menu_repository(request),
        blob_store=get_blob_store(request),
        base_url=get_settings(request).public_base_url(),
    )
