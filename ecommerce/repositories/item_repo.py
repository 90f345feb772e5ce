"""Item Repository - Item catalog lookups."""
from typing import List, Optional

from ecommerce.models import Item

from .base import BaseRepository


class ItemRepository(BaseRepository):
    """Item database operations."""

    async def find_all(self) -> List[Item]:
        """Get every item in the catalog."""
        result = await self.client.table("item").select("*").order("id").execute()
        return [Item(**row) for row in result.data]

    async def find_by_id(self, item_id: int) -> Optional[Item]:
        """Get item by ID."""
        result = await self.client.table("item").select("*").eq("id", item_id).execute()
        return Item(**result.data[0]) if result.data else None

    async def find_by_name(self, name: str) -> List[Item]:
        """Get all items with an exact name match."""
        result = await self.client.table("item").select("*").eq("name", name).execute()
        return [Item(**row) for row in result.data]

    async def find_by_ids(self, item_ids: List[int]) -> List[Item]:
        """Get items for a set of IDs (order not guaranteed)."""
        if not item_ids:
            return []
        result = await self.client.table("item").select("*").in_("id", item_ids).execute()
        return [Item(**row) for row in result.data]
