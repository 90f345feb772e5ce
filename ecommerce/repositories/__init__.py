"""
Repository Pattern for persistence

- UserRepository: user lookup (with cart)
- ItemRepository: item catalog lookup
- CartRepository: cart load/save

In-memory variants with the same interface live in ``memory``.
"""
from .user_repo import UserRepository
from .item_repo import ItemRepository
from .cart_repo import CartRepository
from .memory import InMemoryUserRepository, InMemoryItemRepository, InMemoryCartRepository

__all__ = [
    "UserRepository",
    "ItemRepository",
    "CartRepository",
    "InMemoryUserRepository",
    "InMemoryItemRepository",
    "InMemoryCartRepository",
]
