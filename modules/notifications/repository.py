"""
Notification repository for database access.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.models import Pagination
from shared.repository import BaseRepository
from .models import Notification, NotificationStatus, NotificationType


class NotificationRepository(BaseRepository[Notification]):
    """
    Repository for notification data access.
    """

    table = "notifications"

    def create_notification(self, data: dict[str, Any]) -> Notification:
        result = self._db.table(self.table).insert(data).execute()
        return self._map_to_notification(result.data[0])

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        result = self._db.table(self.table).select("*").eq("id", notification_id).execute()
        if not result.data:
            return None
        return self._map_to_notification(result.data[0])

    def list_by_user(self, user_id: str, pagination: Pagination) -> tuple[list[Notification], int]:
        rows, total = self._list_page(pagination, {"user_id": user_id})
        return [self._map_to_notification(row) for row in rows], total

    def update_status(
        self,
        notification_id: str,
        status: NotificationStatus,
        error_message: Optional[str] = None,
    ) -> Optional[Notification]:
        """
        Record the outcome of a send.

        sent_at is stamped when the status is SENT.
        """
        now = datetime.now(timezone.utc).isoformat()
        data: dict[str, Any] = {"status": status.value, "updated_at": now}
        if status == NotificationStatus.SENT:
            data["sent_at"] = now
        if error_message is not None:
            data["error_message"] = error_message

        result = self._db.table(self.table).update(data).eq("id", notification_id).execute()
        if not result.data:
            return None
        return self._map_to_notification(result.data[0])

    def _map_to_notification(self, data: dict[str, Any]) -> Notification:
        return Notification(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            type=NotificationType(data["type"]),
            recipient=data["recipient"],
            subject=data.get("subject") or "",
            content=data["content"],
            status=NotificationStatus(data["status"]),
            error_message=data.get("error_message"),
            metadata=data.get("metadata") or {},
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            sent_at=data.get("sent_at"),
        )
