"""
Notifications module.

Sends transactional email and keeps a record of every attempt.
"""

from .interfaces import INotificationService
from .models import (
    EmailNotificationRequest,
    Notification,
    NotificationResponse,
    NotificationStatus,
    NotificationType,
)
from .exceptions import (
    EmailDeliveryError,
    NotificationAccessDeniedError,
    NotificationNotFoundError,
)

__all__ = [
    "INotificationService",
    "EmailNotificationRequest",
    "Notification",
    "NotificationResponse",
    "NotificationStatus",
    "NotificationType",
    "EmailDeliveryError",
    "NotificationAccessDeniedError",
    "NotificationNotFoundError",
]
