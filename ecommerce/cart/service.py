"""Cart modification service.

Resolves the user and item for a request, mutates the user's cart and hands
it to the cart repository.
"""

from ecommerce.errors import NotFoundError
from ecommerce.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from ecommerce.models import Cart, User
from ecommerce.money import multiply

logger = get_logger(__name__)


class CartService:
    """
    Add/remove items in a user's cart.

    Collaborators are injected and only need the following async methods:
    - users.find_by_username(username) -> User | None
    - items.find_by_id(item_id) -> Item | None
    - carts.save(cart) -> Cart
    """

    def __init__(self, users, items, carts):
        self.users = users
        self.items = items
        self.carts = carts

    async def add_to_cart(self, username: str, item_id: int, quantity: int) -> Cart:
        """Append ``quantity`` units of the item to the user's cart and save it."""
        user, item = await self._resolve(username, item_id)

        cart = self._cart_for(user)
        for _ in range(quantity):
            cart.add_item(item)

        await self.carts.save(cart)
        logger.info(
            f"Added {quantity} x item {item.id} ({multiply(item.price, max(quantity, 0))}) to cart of "
            f"{sanitize_string_for_logging(username)} (total={cart.total})"
        )
        return cart

    async def remove_from_cart(self, username: str, item_id: int, quantity: int) -> Cart:
        """Remove up to ``quantity`` units of the item from the user's cart and save it."""
        user, item = await self._resolve(username, item_id)

        cart = self._cart_for(user)
        removed = 0
        for _ in range(quantity):
            if not cart.remove_item(item):
                break
            removed += 1

        await self.carts.save(cart)
        logger.info(
            f"Removed {removed}/{quantity} x item {item.id} from cart of "
            f"{sanitize_string_for_logging(username)} (total={cart.total})"
        )
        return cart

    async def _resolve(self, username: str, item_id: int):
        user = await self.users.find_by_username(username)
        if user is None:
            logger.warning(f"Cart update for unknown user {sanitize_string_for_logging(username)}")
            raise NotFoundError.user()

        item = await self.items.find_by_id(item_id)
        if item is None:
            logger.warning(f"Cart update for unknown item {sanitize_id_for_logging(item_id)}")
            raise NotFoundError.item()

        return user, item

    @staticmethod
    def _cart_for(user: User) -> Cart:
        # Users created outside the cart flow may not have a cart yet
        if user.cart is None:
            user.cart = Cart()
        user.cart.user = user
        return user.cart
