"""
Shared Dependencies for Routers

Repositories are built once at startup (``init_repositories``) because the
Supabase client is created asynchronously. Routers get them through the
``get_*`` providers, which tests replace via ``app.dependency_overrides``.
"""

from dataclasses import dataclass
from typing import Optional

from ecommerce.cart import CartService
from ecommerce.db import (
    BACKEND_SUPABASE,
    DEMO_ITEMS,
    demo_users,
    get_storage_backend,
    get_supabase,
)
from ecommerce.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Repositories:
    users: object
    items: object
    carts: object


_repositories: Optional[Repositories] = None
_cart_service: Optional[CartService] = None


async def init_repositories() -> Repositories:
    """Build repositories for the configured storage backend (idempotent)."""
    global _repositories

    if _repositories is not None:
        return _repositories

    backend = get_storage_backend()
    if backend == BACKEND_SUPABASE:
        from ecommerce.repositories import CartRepository, ItemRepository, UserRepository

        client = await get_supabase()
        items = ItemRepository(client)
        carts = CartRepository(client, items)
        users = UserRepository(client, carts)
    else:
        from ecommerce.repositories import (
            InMemoryCartRepository,
            InMemoryItemRepository,
            InMemoryUserRepository,
        )

        items = InMemoryItemRepository(DEMO_ITEMS)
        carts = InMemoryCartRepository()
        users = InMemoryUserRepository(demo_users())

    _repositories = Repositories(users=users, items=items, carts=carts)
    logger.info(f"Repositories initialized (backend={backend})")
    return _repositories


def reset_repositories() -> None:
    """Drop the cached repositories and service (used on shutdown and in tests)."""
    global _repositories, _cart_service
    _repositories = None
    _cart_service = None


def get_repositories() -> Repositories:
    if _repositories is None:
        raise RuntimeError("Repositories are not initialized. Call init_repositories() at startup.")
    return _repositories


def get_user_repository():
    return get_repositories().users


def get_item_repository():
    return get_repositories().items


def get_cart_service() -> CartService:
    """Get or create CartService singleton"""
    global _cart_service
    if _cart_service is None:
        repos = get_repositories()
        _cart_service = CartService(users=repos.users, items=repos.items, carts=repos.carts)
    return _cart_service
