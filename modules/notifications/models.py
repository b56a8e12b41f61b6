"""
Notifications module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class NotificationType(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class NotificationStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


class Notification(BaseModel):
    """A delivery attempt, recorded before sending and updated after."""

    id: str
    user_id: str
    type: NotificationType
    recipient: str
    subject: str = ""
    content: str
    status: NotificationStatus
    error_message: Optional[str] = None
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
    sent_at: Optional[datetime] = None


class EmailNotificationRequest(BaseModel):
    """Request to send an email."""

    to: EmailStr
    subject: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    html_content: Optional[str] = None
    cc: list[EmailStr] = Field(default_factory=list)
    bcc: list[EmailStr] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)


class NotificationResponse(BaseModel):
    """Summary returned after a send."""

    id: str
    type: NotificationType
    status: NotificationStatus
    recipient: str
    created_at: datetime
