"""Domain Models - Pydantic models for users, items and carts."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ecommerce.money import add, round_money, subtract, to_decimal as _to_decimal, to_float


class Item(BaseModel):
    """Catalog item."""
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal

    class Config:
        extra = "ignore"  # Ignore unknown columns from DB

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": to_float(self.price),
        }


class Cart(BaseModel):
    """
    Shopping cart owned by a single user.

    ``items`` keeps one entry per unit, so an item added three times appears
    three times. ``total`` is the sum of the prices of everything in ``items``.
    """
    id: Optional[int] = None
    items: list[Item] = []
    total: Decimal = Decimal("0")
    user: Optional["User"] = Field(default=None, exclude=True, repr=False)

    class Config:
        extra = "ignore"

    @field_validator("items", mode="before")
    @classmethod
    def default_items(cls, v):
        return [] if v is None else v

    @field_validator("total", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v):
        return _to_decimal(v)

    @property
    def item_count(self) -> int:
        return len(self.items)

    def add_item(self, item: Item) -> None:
        """Append one unit of ``item`` and add its price to the total."""
        self.items.append(item)
        self.total = add(self.total, item.price)

    def remove_item(self, item: Item) -> bool:
        """
        Remove one unit of ``item`` (matched by id).

        The total only changes when a unit was actually removed.

        Returns:
            True if a unit was removed, False if the item was not in the cart
        """
        for index, existing in enumerate(self.items):
            if existing.id == item.id:
                removed = self.items.pop(index)
                self.total = subtract(self.total, removed.price)
                return True
        return False

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "items": [item.to_dict() for item in self.items],
            "total": to_float(round_money(self.total)),
            "user": self.user.to_dict() if self.user else None,
        }


class User(BaseModel):
    """Shop user. Each user owns exactly one cart."""
    id: int
    username: str
    password: Optional[str] = Field(default=None, exclude=True, repr=False)
    cart: Optional[Cart] = Field(default=None, repr=False)

    class Config:
        extra = "ignore"

    def to_dict(self) -> dict:
        """Public view of the user; never includes the password or the cart."""
        return {"id": self.id, "username": self.username}


Cart.model_rebuild()
