"""
Cart Router

Add/remove items in a user's cart.

Both endpoints answer 200 with the updated cart, or 404 when the user or the
item does not exist.
"""
from fastapi import APIRouter, Depends, HTTPException

from ecommerce.cart import CartService
from ecommerce.errors import ERROR_INTERNAL, NotFoundError
from ecommerce.logging import get_logger
from ecommerce.models import Cart

from .deps import get_cart_service
from .models import ModifyCartRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


def _format_cart_response(cart: Cart) -> dict:
    """Serialize cart for the API (money as JSON numbers, no passwords)."""
    return cart.to_dict()


@router.post("/addToCart")
async def add_to_cart(
    request: ModifyCartRequest,
    service: CartService = Depends(get_cart_service),
):
    """Add ``quantity`` units of an item to the user's cart."""
    try:
        cart = await service.add_to_cart(request.username, request.item_id, request.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        logger.error(f"Failed to add to cart: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)

    return _format_cart_response(cart)


@router.post("/removeFromCart")
async def remove_from_cart(
    request: ModifyCartRequest,
    service: CartService = Depends(get_cart_service),
):
    """Remove up to ``quantity`` units of an item from the user's cart."""
    try:
        cart = await service.remove_from_cart(request.username, request.item_id, request.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        logger.error(f"Failed to remove from cart: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)

    return _format_cart_response(cart)
