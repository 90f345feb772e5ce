"""User lookup router (read-only)."""
from fastapi import APIRouter, Depends, HTTPException

from ecommerce.errors import ERROR_USER_NOT_FOUND

from .deps import get_user_repository

router = APIRouter(prefix="/api/user", tags=["users"])


@router.get("/id/{user_id}")
async def get_user_by_id(user_id: int, users=Depends(get_user_repository)):
    user = await users.find_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=ERROR_USER_NOT_FOUND)
    return user.to_dict()


@router.get("/{username}")
async def get_user_by_username(username: str, users=Depends(get_user_repository)):
    user = await users.find_by_username(username)
    if user is None:
        raise HTTPException(status_code=404, detail=ERROR_USER_NOT_FOUND)
    return user.to_dict()
