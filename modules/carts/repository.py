"""
Cart repository for database access.

A cart row stores its lines as a JSON object keyed by product ID.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Cart, CartItem


class CartRepository(BaseRepository[Cart]):
    """
    Repository for cart data access.

    One cart per user, enforced by a unique index on user_id.
    """

    table = "carts"

    def create_cart(self, user_id: str) -> Cart:
        result = self._db.table(self.table).insert({"user_id": user_id, "items": {}}).execute()
        return self._map_to_cart(result.data[0])

    def get_by_user(self, user_id: str) -> Optional[Cart]:
        result = self._db.table(self.table).select("*").eq("user_id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_cart(result.data[0])

    def save_items(self, cart: Cart) -> Cart:
        """Persist the cart's lines and bump updated_at."""
        data = {
            "items": {
                product_id: {
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price),
                }
                for product_id, item in cart.items.items()
            },
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._db.table(self.table).update(data).eq("id", cart.id).execute()
        return self._map_to_cart(result.data[0])

    def _map_to_cart(self, data: dict[str, Any]) -> Cart:
        items = {
            product_id: CartItem(
                product_id=item["product_id"],
                quantity=item["quantity"],
                unit_price=Decimal(str(item["unit_price"])),
            )
            for product_id, item in (data.get("items") or {}).items()
        }
        return Cart(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            items=items,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
