"""Cart package: cart modification service."""
from .service import CartService

__all__ = ["CartService"]
