"""User Repository - User lookups.

Users are returned with their cart attached (``user.cart.user is user``).
"""
from typing import Optional

from ecommerce.models import User

from .base import BaseRepository
from .cart_repo import CartRepository


class UserRepository(BaseRepository):
    """User database operations."""

    def __init__(self, client, carts: Optional[CartRepository] = None) -> None:
        super().__init__(client)
        self._carts = carts or CartRepository(client)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by internal ID."""
        result = await self.client.table("users").select("*").eq("id", user_id).execute()
        return await self._with_cart(result.data[0]) if result.data else None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        result = await self.client.table("users").select("*").eq("username", username).execute()
        return await self._with_cart(result.data[0]) if result.data else None

    async def _with_cart(self, row: dict) -> User:
        user = User(**row)
        cart = await self._carts.find_by_user_id(user.id)
        if cart is not None:
            cart.user = user
            user.cart = cart
        return user
