"""Cart Repository - Cart persistence.

A cart is stored as one ``cart`` row plus one ``cart_item`` row per unit,
ordered by ``position``.
"""
from typing import Optional

from ecommerce.logging import get_logger
from ecommerce.models import Cart
from ecommerce.money import round_money, to_float

from .base import BaseRepository
from .item_repo import ItemRepository

logger = get_logger(__name__)


class CartRepository(BaseRepository):
    """Cart database operations."""

    def __init__(self, client, items: Optional[ItemRepository] = None) -> None:
        super().__init__(client)
        self._items = items or ItemRepository(client)

    async def find_by_user_id(self, user_id: int) -> Optional[Cart]:
        """Load a user's cart with its items in insertion order."""
        result = await self.client.table("cart").select("*").eq("user_id", user_id).execute()
        if not result.data:
            return None

        row = result.data[0]
        lines = (
            await self.client.table("cart_item")
            .select("item_id, position")
            .eq("cart_id", row["id"])
            .order("position")
            .execute()
        )
        item_ids = [line["item_id"] for line in lines.data]
        by_id = {item.id: item for item in await self._items.find_by_ids(sorted(set(item_ids)))}

        missing = [item_id for item_id in item_ids if item_id not in by_id]
        if missing:
            logger.warning(f"Cart {row['id']} references unknown items {sorted(set(missing))}")

        # Total is rebuilt from the lines that resolved; the stored value may be stale
        cart = Cart(id=row["id"])
        for item_id in item_ids:
            if item_id in by_id:
                cart.add_item(by_id[item_id])
        return cart

    async def save(self, cart: Cart) -> Cart:
        """
        Write the cart's item lines, then its total.

        Lines are upserted by (cart_id, position) and trailing positions are
        deleted afterwards, so a failed write never leaves the cart without
        its previous lines. The total is written last.
        """
        user_id = cart.user.id if cart.user else None

        if cart.id is None:
            result = await self.client.table("cart").insert({"user_id": user_id, "total": 0.0}).execute()
            cart.id = result.data[0]["id"]

        if cart.items:
            rows = [
                {"cart_id": cart.id, "item_id": item.id, "position": position}
                for position, item in enumerate(cart.items)
            ]
            await self.client.table("cart_item").upsert(rows, on_conflict="cart_id,position").execute()

        await (
            self.client.table("cart_item")
            .delete()
            .eq("cart_id", cart.id)
            .gte("position", len(cart.items))
            .execute()
        )

        await (
            self.client.table("cart")
            .upsert({"id": cart.id, "user_id": user_id, "total": to_float(round_money(cart.total))})
            .execute()
        )
        return cart
