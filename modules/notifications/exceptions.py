"""
Notifications module exceptions.
"""

from shared.exceptions import ForbiddenError, NotFoundError, ThirdPartyError


class NotificationNotFoundError(NotFoundError):
    def __init__(self, notification_id: str):
        super().__init__("Notification not found")
        self.notification_id = notification_id


class NotificationAccessDeniedError(ForbiddenError):
    def __init__(self, notification_id: str):
        super().__init__("You do not have access to this notification")
        self.notification_id = notification_id


class EmailDeliveryError(ThirdPartyError):
    """Raised when the email provider rejects or fails a send."""

    def __init__(self, notification_id: str, cause: BaseException):
        super().__init__("Failed to send email", service="resend", cause=cause)
        self.notification_id = notification_id
