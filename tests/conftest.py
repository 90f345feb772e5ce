"""Pytest configuration and fixtures"""
import os
from unittest.mock import AsyncMock, Mock

import pytest

# Set test environment variables
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from ecommerce.models import Item, User
from ecommerce.repositories import (
    InMemoryCartRepository,
    InMemoryItemRepository,
    InMemoryUserRepository,
)
from tests.factories import PASSWORD, USER_NAME, create_item, create_user


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client routing client.table(name) to client.tables[name]"""
    client = Mock()
    client.tables = {}
    client.table.side_effect = lambda name: client.tables[name]
    return client


@pytest.fixture
def user():
    return create_user()


@pytest.fixture
def item():
    return create_item()


@pytest.fixture
def mock_users():
    users = Mock()
    users.find_by_username = AsyncMock(return_value=None)
    return users


@pytest.fixture
def mock_items():
    items = Mock()
    items.find_by_id = AsyncMock(return_value=None)
    return items


@pytest.fixture
def mock_carts():
    carts = Mock()
    carts.save = AsyncMock(side_effect=lambda cart: cart)
    return carts


@pytest.fixture
def memory_repositories():
    """In-memory repositories seeded with user 'john' and two items"""
    items = InMemoryItemRepository([
        create_item(1, "10.0"),
        Item(id=2, name="Square Widget", description="A widget that is square", price="1.99"),
    ])
    users = InMemoryUserRepository([User(id=1, username=USER_NAME, password=PASSWORD)])
    carts = InMemoryCartRepository()
    return users, items, carts
