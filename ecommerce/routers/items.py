"""Item catalog router (read-only)."""
from fastapi import APIRouter, Depends, HTTPException

from ecommerce.errors import ERROR_ITEM_NOT_FOUND

from .deps import get_item_repository

router = APIRouter(prefix="/api/item", tags=["items"])


@router.get("")
async def get_items(items=Depends(get_item_repository)):
    """List the whole catalog."""
    return [item.to_dict() for item in await items.find_all()]


@router.get("/{item_id}")
async def get_item_by_id(item_id: int, items=Depends(get_item_repository)):
    item = await items.find_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=ERROR_ITEM_NOT_FOUND)
    return item.to_dict()


@router.get("/name/{name}")
async def get_items_by_name(name: str, items=Depends(get_item_repository)):
    """Items with an exact name match; 404 when there are none."""
    found = await items.find_by_name(name)
    if not found:
        raise HTTPException(status_code=404, detail=ERROR_ITEM_NOT_FOUND)
    return [item.to_dict() for item in found]
