"""
Carts module data models.

Line and cart totals are derived at read time from quantities and unit
prices; they are never stored.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from shared.models import Money, UUIDStr


class CartItem(BaseModel):
    """One product line in a cart."""

    product_id: str
    quantity: int = Field(..., ge=1)
    unit_price: Money

    @computed_field
    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity


class Cart(BaseModel):
    """A user's cart. Items are keyed by product ID."""

    id: str
    user_id: str
    items: dict[str, CartItem] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def total(self) -> Money:
        return sum((item.total_price for item in self.items.values()), Decimal("0"))


class AddItemRequest(BaseModel):
    """Put a product line in the cart, replacing any existing line for it."""

    product_id: UUIDStr
    quantity: int = Field(..., ge=1)
    unit_price: Money = Field(..., gt=0)


class UpdateQuantityRequest(BaseModel):
    """Change a line's quantity; zero removes the line."""

    product_id: UUIDStr
    quantity: int = Field(..., ge=0)
