"""
Product repository for database access.

Encapsulates all Supabase queries and data mapping for the products table.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from shared.models import Pagination
from shared.repository import BaseRepository
from .models import Product, ProductStatus


class ProductRepository(BaseRepository[Product]):
    """
    Repository for product data access.

    Note: This repository does NOT perform authorization checks.
    """

    table = "products"

    def create_product(self, data: dict[str, Any]) -> Product:
        """
        Insert a product.

        Args:
            data: Column values; Decimal prices are sent as strings.

        Returns:
            Created Product with generated ID and timestamps.
        """
        result = self._db.table(self.table).insert(self._serialize(data)).execute()
        return self._map_to_product(result.data[0])

    def get_by_id(self, product_id: str) -> Optional[Product]:
        result = self._db.table(self.table).select("*").eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def get_by_ids(self, product_ids: list[str]) -> dict[str, Product]:
        """Fetch several products at once, keyed by ID. Missing IDs are absent."""
        if not product_ids:
            return {}
        result = self._db.table(self.table).select("*").in_("id", product_ids).execute()
        products = [self._map_to_product(row) for row in result.data or []]
        return {p.id: p for p in products}

    def update_product(self, product_id: str, fields: dict[str, Any]) -> Optional[Product]:
        """
        Update the given columns.

        Returns:
            The updated Product, or None if no row matched.
        """
        data = {**self._serialize(fields), "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table(self.table).update(data).eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def decrement_stock(self, product_id: str, current: int, quantity: int) -> bool:
        """
        Reduce stock from ``current`` by ``quantity``.

        The update only applies while the stored quantity still equals
        ``current``.

        Returns:
            True if a row was updated.
        """
        result = (
            self._db.table(self.table)
            .update({
                "stock_quantity": current - quantity,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            })
            .eq("id", product_id)
            .eq("stock_quantity", current)
            .execute()
        )
        return bool(result.data)

    def list_products(self, pagination: Pagination) -> tuple[list[Product], int]:
        rows, total = self._list_page(pagination)
        return [self._map_to_product(row) for row in rows], total

    def _serialize(self, data: dict[str, Any]) -> dict[str, Any]:
        serialized = {}
        for key, value in data.items():
            if isinstance(value, Decimal):
                value = str(value)
            elif isinstance(value, ProductStatus):
                value = value.value
            serialized[key] = value
        return serialized

    def _map_to_product(self, data: dict[str, Any]) -> Product:
        return Product(
            id=str(data["id"]),
            category_id=str(data["category_id"]),
            name=data["name"],
            description=data.get("description") or "",
            price=Decimal(str(data["price"])),
            stock_quantity=data["stock_quantity"],
            sku=data["sku"],
            status=ProductStatus(data.get("status", ProductStatus.ACTIVE.value)),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
