"""
Notifications module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import PaginatedResponse, Pagination

from .models import EmailNotificationRequest, Notification, NotificationResponse


@runtime_checkable
class INotificationService(Protocol):
    """
    Interface for notification operations.
    """

    async def send_email(self, user_id: str, request: EmailNotificationRequest) -> NotificationResponse:
        """
        Record and send an email.

        The notification is stored as pending, then marked sent or
        failed depending on the provider's answer.

        Raises:
            EmailDeliveryError: If the provider fails; the record is
                left in 'failed' status with the error message
        """
        ...

    async def get_notification(self, notification_id: str, user_id: str) -> Notification:
        """
        Raises:
            NotificationNotFoundError: If the notification doesn't exist
            NotificationAccessDeniedError: If it belongs to someone else
        """
        ...

    async def list_notifications(
        self, user_id: str, pagination: Pagination
    ) -> PaginatedResponse[Notification]:
        ...
