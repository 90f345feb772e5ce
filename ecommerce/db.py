"""
Database Module - Supabase client and storage backend selection

Provides:
- Async Supabase client singleton for PostgreSQL operations
- STORAGE_BACKEND switch between Supabase and in-memory repositories
- Demo catalog used to seed the in-memory backend
"""

import os
from decimal import Decimal
from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client

from ecommerce.models import Item, User

SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")

BACKEND_SUPABASE = "supabase"
BACKEND_MEMORY = "memory"

# Defaults to Supabase only when credentials are present
STORAGE_BACKEND = os.environ.get(
    "STORAGE_BACKEND",
    BACKEND_SUPABASE if SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY else BACKEND_MEMORY,
).lower()

# Comma-separated usernames created (with empty carts) in the in-memory backend
DEMO_USERS = os.environ.get("DEMO_USERS", "")

DEMO_ITEMS = (
    Item(id=1, name="Round Widget", description="A widget that is round", price=Decimal("2.99")),
    Item(id=2, name="Square Widget", description="A widget that is square", price=Decimal("1.99")),
)

_async_supabase_client: Optional[AsyncClient] = None


async def get_supabase() -> AsyncClient:
    """
    Get async Supabase client (singleton).
    """
    global _async_supabase_client

    if _async_supabase_client is None:
        if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        _async_supabase_client = await acreate_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)

    return _async_supabase_client


def get_storage_backend() -> str:
    """Return the configured backend, validating its value."""
    if STORAGE_BACKEND not in (BACKEND_SUPABASE, BACKEND_MEMORY):
        raise ValueError(
            f"STORAGE_BACKEND must be '{BACKEND_SUPABASE}' or '{BACKEND_MEMORY}', got '{STORAGE_BACKEND}'"
        )
    return STORAGE_BACKEND


def demo_users() -> list[User]:
    """Users listed in DEMO_USERS, numbered from 1."""
    names = [name.strip() for name in DEMO_USERS.split(",") if name.strip()]
    return [User(id=index, username=name) for index, name in enumerate(names, start=1)]
