"""
Order repository for database access.

Encapsulates all Supabase queries and data mapping for order-related tables:
- orders
- order_items
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from shared.models import Pagination
from shared.repository import BaseRepository
from .models import Address, Order, OrderItem, OrderPaymentStatus, OrderStatus

ORDER_WITH_ITEMS = "*, order_items(*)"


class OrderRepository(BaseRepository[Order]):
    """
    Repository for order data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying customer ownership.
    """

    table = "orders"

    def create_order(
        self,
        customer_id: str,
        shipping_address: Address,
        total_amount: Decimal,
        items: list[OrderItem],
    ) -> Order:
        """
        Insert an order and its items.

        Returns:
            Created Order with generated IDs and timestamps.
        """
        order_data = {
            "customer_id": customer_id,
            "status": OrderStatus.PENDING.value,
            "payment_status": OrderPaymentStatus.PENDING.value,
            "total_amount": str(total_amount),
            "shipping_address": shipping_address.model_dump(),
        }
        result = self._db.table(self.table).insert(order_data).execute()
        order_row = result.data[0]

        item_rows = [
            {
                "order_id": order_row["id"],
                "product_id": item.product_id,
                "quantity": item.quantity,
                "unit_price": str(item.unit_price),
            }
            for item in items
        ]
        items_result = self._db.table("order_items").insert(item_rows).execute()

        return self._map_to_order({**order_row, "order_items": items_result.data})

    def get_by_id(self, order_id: str) -> Optional[Order]:
        result = self._db.table(self.table).select(ORDER_WITH_ITEMS).eq("id", order_id).execute()
        if not result.data:
            return None
        return self._map_to_order(result.data[0])

    def list_by_customer(self, customer_id: str, pagination: Pagination) -> tuple[list[Order], int]:
        result = (
            self._db.table(self.table)
            .select(ORDER_WITH_ITEMS, count="exact")
            .eq("customer_id", customer_id)
            .order("created_at", desc=True)
            .range(pagination.offset, pagination.offset + pagination.limit - 1)
            .execute()
        )
        orders = [self._map_to_order(row) for row in result.data or []]
        return orders, result.count or 0

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        result = (
            self._db.table(self.table)
            .update({"status": status.value, "updated_at": datetime.now(timezone.utc).isoformat()})
            .eq("id", order_id)
            .execute()
        )
        if not result.data:
            return None
        return self.get_by_id(order_id)

    def _map_to_item(self, data: dict[str, Any]) -> OrderItem:
        return OrderItem(
            id=str(data["id"]),
            order_id=str(data["order_id"]),
            product_id=str(data["product_id"]),
            quantity=data["quantity"],
            unit_price=Decimal(str(data["unit_price"])),
        )

    def _map_to_order(self, data: dict[str, Any]) -> Order:
        return Order(
            id=str(data["id"]),
            customer_id=str(data["customer_id"]),
            status=OrderStatus(data["status"]),
            total_amount=Decimal(str(data["total_amount"])),
            payment_status=OrderPaymentStatus(data.get("payment_status") or "pending"),
            payment_intent_id=data.get("payment_intent_id"),
            shipping_address=Address(**data["shipping_address"]),
            items=[self._map_to_item(item) for item in data.get("order_items") or []],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
