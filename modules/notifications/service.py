"""
Notifications service implementation.

Email bodies are sanitized before they reach the provider: the plain
text part is stripped of all markup and the HTML part is reduced to a
safe subset.
"""

import asyncio
import logging

from providers.base import EmailMessage, EmailProvider
from providers.email import EMAIL_DELIVERY_ERRORS, sanitize_html, sanitize_text
from shared.config import Settings
from shared.database import run_db
from shared.models import PaginatedResponse, Pagination

from .exceptions import (
    EmailDeliveryError,
    NotificationAccessDeniedError,
    NotificationNotFoundError,
)
from .interfaces import INotificationService
from .models import (
    EmailNotificationRequest,
    Notification,
    NotificationResponse,
    NotificationStatus,
    NotificationType,
)
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService(INotificationService):
    """
    Notification service with Supabase and Resend backends.

    Implements INotificationService protocol.
    """

    def __init__(
        self,
        repository: NotificationRepository,
        provider: EmailProvider,
        settings: Settings,
    ):
        self._repository = repository
        self._provider = provider
        self._timeout = settings.db_timeout_seconds

    async def send_email(self, user_id: str, request: EmailNotificationRequest) -> NotificationResponse:
        notification = await run_db(
            self._repository.create_notification,
            {
                "user_id": user_id,
                "type": NotificationType.EMAIL.value,
                "recipient": str(request.to),
                "subject": request.subject,
                "content": request.content,
                "status": NotificationStatus.PENDING.value,
                "metadata": request.metadata,
            },
            timeout=self._timeout,
        )

        message = EmailMessage(
            to=str(request.to),
            subject=request.subject,
            text=sanitize_text(request.content),
            html=sanitize_html(request.html_content) if request.html_content else None,
            cc=[str(addr) for addr in request.cc],
            bcc=[str(addr) for addr in request.bcc],
        )

        try:
            await asyncio.to_thread(self._provider.send, message)
        except EMAIL_DELIVERY_ERRORS as e:
            logger.error("Email %s failed: %s", notification.id, type(e).__name__)
            await run_db(
                self._repository.update_status,
                notification.id,
                NotificationStatus.FAILED,
                str(e),
                timeout=self._timeout,
            )
            raise EmailDeliveryError(notification.id, e)

        sent = await run_db(
            self._repository.update_status,
            notification.id,
            NotificationStatus.SENT,
            timeout=self._timeout,
        )
        sent = sent or notification.model_copy(update={"status": NotificationStatus.SENT})

        logger.info("Email %s sent", notification.id)
        return NotificationResponse(
            id=sent.id,
            type=sent.type,
            status=sent.status,
            recipient=sent.recipient,
            created_at=sent.created_at,
        )

    async def get_notification(self, notification_id: str, user_id: str) -> Notification:
        notification = await run_db(self._repository.get_by_id, notification_id, timeout=self._timeout)
        if notification is None:
            raise NotificationNotFoundError(notification_id)
        if notification.user_id != user_id:
            raise NotificationAccessDeniedError(notification_id)
        return notification

    async def list_notifications(
        self, user_id: str, pagination: Pagination
    ) -> PaginatedResponse[Notification]:
        notifications, total = await run_db(
            self._repository.list_by_user, user_id, pagination, timeout=self._timeout
        )
        return PaginatedResponse[Notification](
            items=notifications,
            total=total,
            page=pagination.page,
            page_size=pagination.page_size,
        )
