"""
HTTP routers

- cart: add/remove items in a user's cart
- items: item catalog lookups
- users: user lookups
"""
from .cart import router as cart_router
from .items import router as items_router
from .users import router as users_router

__all__ = ["cart_router", "items_router", "users_router"]
