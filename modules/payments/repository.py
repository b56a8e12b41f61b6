"""
Payment repository for database access.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.models import Pagination
from shared.repository import BaseRepository
from .models import Payment, PaymentStatus


class PaymentRepository(BaseRepository[Payment]):
    """
    Repository for payment data access.

    Note: This repository does NOT perform authorization checks.
    """

    table = "payments"

    def create_payment(self, data: dict[str, Any]) -> Payment:
        result = self._db.table(self.table).insert(data).execute()
        return self._map_to_payment(result.data[0])

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        result = self._db.table(self.table).select("*").eq("id", payment_id).execute()
        if not result.data:
            return None
        return self._map_to_payment(result.data[0])

    def list_by_customer(self, customer_id: str, pagination: Pagination) -> tuple[list[Payment], int]:
        rows, total = self._list_page(pagination, {"customer_id": customer_id})
        return [self._map_to_payment(row) for row in rows], total

    def update_status(self, payment_id: str, status: PaymentStatus) -> Optional[Payment]:
        """
        Set a payment's status.

        Returns:
            The updated Payment, or None if no payment has this ID.
        """
        result = (
            self._db.table(self.table)
            .update({"status": status.value, "updated_at": datetime.now(timezone.utc).isoformat()})
            .eq("id", payment_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_payment(result.data[0])

    def _map_to_payment(self, data: dict[str, Any]) -> Payment:
        return Payment(
            id=data["id"],
            customer_id=str(data["customer_id"]),
            amount=data["amount"],
            currency=data["currency"],
            description=data.get("description") or "",
            payment_method=data["payment_method"],
            status=PaymentStatus(data["status"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
