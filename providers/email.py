"""
Resend email provider and content sanitization.

Plain-text bodies are stripped of all markup; HTML bodies keep a safe
subset of tags and attributes (links, formatting, tables, images).
"""

import logging

import nh3
import resend
import resend.exceptions

from .base import EmailMessage, EmailProvider

logger = logging.getLogger(__name__)


class EmailSendError(RuntimeError):
    """Raised when Resend accepts a request but returns no message id."""


# Failures that mean the message was not delivered
EMAIL_DELIVERY_ERRORS = (resend.exceptions.ResendError, EmailSendError)


def sanitize_text(content: str) -> str:
    """Remove every HTML tag, leaving only escaped text."""
    return nh3.clean(content, tags=set())


def sanitize_html(content: str) -> str:
    """Reduce HTML to nh3's default allow-list of safe tags and attributes."""
    return nh3.clean(content)


class ResendEmailProvider(EmailProvider):
    """Sends email through the Resend API."""

    def __init__(self, api_key: str, from_address: str, from_name: str):
        self._api_key = api_key
        self._sender = f"{from_name} <{from_address}>"

    def send(self, message: EmailMessage) -> str:
        payload: resend.Emails.SendParams = {
            "from": self._sender,
            "to": [message.to],
            "subject": message.subject,
            "text": message.text,
        }
        if message.html:
            payload["html"] = message.html
        if message.cc:
            payload["cc"] = list(message.cc)
        if message.bcc:
            payload["bcc"] = list(message.bcc)

        resend.api_key = self._api_key
        response = resend.Emails.send(payload)
        message_id = response.get("id") if isinstance(response, dict) else None
        if not message_id:
            raise EmailSendError(f"Unexpected response from Resend: {response!r}")

        logger.info("Sent email %s", message_id)
        return message_id
