"""In-memory repositories.

Same async interface as the Supabase repositories, backed by dicts. Used for
local development (``STORAGE_BACKEND=memory``) and tests.
"""
from itertools import count
from typing import Iterable, List, Optional

from ecommerce.models import Cart, Item, User


class InMemoryItemRepository:
    """Item catalog held in memory."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: dict[int, Item] = {item.id: item for item in items}

    async def find_all(self) -> List[Item]:
        return [self._items[item_id] for item_id in sorted(self._items)]

    async def find_by_id(self, item_id: int) -> Optional[Item]:
        return self._items.get(item_id)

    async def find_by_name(self, name: str) -> List[Item]:
        return [item for item in await self.find_all() if item.name == name]


class InMemoryCartRepository:
    """Carts held in memory, keyed by cart id."""

    def __init__(self) -> None:
        self._carts: dict[int, Cart] = {}
        self._ids = count(1)

    async def save(self, cart: Cart) -> Cart:
        if cart.id is None:
            cart.id = next(self._ids)
        self._carts[cart.id] = cart
        return cart

    async def find_by_user_id(self, user_id: int) -> Optional[Cart]:
        for cart in self._carts.values():
            if cart.user is not None and cart.user.id == user_id:
                return cart
        return None


class InMemoryUserRepository:
    """Users held in memory. Adding a user without a cart gives it an empty one."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[int, User] = {}
        for user in users:
            self.add(user)

    def add(self, user: User) -> User:
        if user.cart is None:
            user.cart = Cart()
        user.cart.user = user
        self._users[user.id] = user
        return user

    async def find_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None
