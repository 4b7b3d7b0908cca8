"""
Menu routes - list menu items and add new ones with an optional image.
"""

from functools import partial
from typing import Any, Dict, List, Optional, Tuple
import logging

import anyio
from fastapi import APIRouter, Depends, Request, status
from starlette.datastructures import UploadFile

from api.dependencies import get_menu_service
from api.responses import ErrorResponse
from app.exceptions import ValidationFailed
from domain.schemas.menu_schemas import MenuItemCreatedResponse, MenuItemResponse
from services.menu_service import ImageUpload, MenuService

router = APIRouter(prefix="/menu", tags=["Menu"])
logger = logging.getLogger("menucatalog.api.menu")

MENU_FIELDS = ("name", "price", "category", "subCategory", "rating", "orders")
IMAGE_FIELD = "image"

_MENU_FORM_SCHEMA = {
    "type": "object",
    "required": ["name", "price", "category"],
    "properties": {
        "name": {"type": "string"},
        "price": {"type": "number"},
        "category": {"type": "string"},
        "subCategory": {"type": "string"},
        "rating": {"type": "string"},
        "orders": {"type": "integer", "default": 0},
        IMAGE_FIELD: {"type": "string", "format": "binary"},
    },
}


async def read_submission(request: Request, max_bytes: int) -> Tuple[Dict[str, Any], Optional[ImageUpload]]:
    """
    Pull menu fields and the optional image out of a POST body.

    Multipart and urlencoded forms are read field by field; a JSON object
    body is accepted too (without an image). At most ``max_bytes + 1`` bytes
    of the image are read so oversized uploads are caught without buffering
    them whole.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise ValidationFailed("Request body is not valid JSON")
        if not isinstance(body, dict):
            raise ValidationFailed("Request body must be a JSON object")
        return {k: body[k] for k in MENU_FIELDS if k in body}, None

    async with request.form() as form:
        fields = {k: form[k] for k in MENU_FIELDS if isinstance(form.get(k), str)}
        image = form.get(IMAGE_FIELD)
        upload = None
        # browsers send an empty, unnamed part when no file was chosen
        if isinstance(image, UploadFile) and image.filename:
            data = await image.read(max_bytes + 1)
            upload = ImageUpload(
                data=data, filename=image.filename, content_type=image.content_type
            )
    return fields, upload


@router.get(
    "",
    response_model=List[MenuItemResponse],
    responses={503: {"model": ErrorResponse}},
)
def list_menu(service: MenuService = Depends(get_menu_service)) -> List[MenuItemResponse]:
    """
    Return every menu item.

    Each item's ``image`` holds an absolute URL to the uploaded picture, or an
    empty string when the item has none.
    """
    return service.list_menu()


@router.post(
    "",
    response_model=MenuItemCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "multipart/form-data": {"schema": _MENU_FORM_SCHEMA},
                "application/json": {
                    "schema": {
                        **_MENU_FORM_SCHEMA,
                        "properties": {
                            k: v
                            for k, v in _MENU_FORM_SCHEMA["properties"].items()
                            if k != IMAGE_FIELD
                        },
                    }
                },
            },
        }
    },
)
async def add_menu_item(
    request: Request, service: MenuService = Depends(get_menu_service)
) -> MenuItemCreatedResponse:
    """
    Add a menu item.

    - **name**, **price**, **category**: required
    - **subCategory**, **rating**: optional text
    - **orders**: optional, defaults to 0
    - **image**: optional image file (multipart only, up to 2 MiB by default)
    """
    fields, upload = await read_submission(request, service.blob_store.max_bytes)
    logger.debug("Menu item submitted: fields=%s image=%s", sorted(fields), upload.filename if upload else None)
    item = await anyio.to_thread.run_sync(partial(service.add_item, fields, upload))
    return MenuItemCreatedResponse(message="Item added successfully", id=item.id)
