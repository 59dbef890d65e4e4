"""Best-effort notification and auto-reply dispatch.

Each dispatch runs in isolation and captures its own outcome in a
``DispatchResult``; nothing raised here reaches the request handler.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from app.contact.records import SubmissionRecord
from app.contact.settings import load_form_settings

logger = logging.getLogger("Contact.notify")

AUTO_REPLY_SUBJECT = "Thank you for contacting us!"
AUTO_REPLY_BODY = (
    "Dear {name},\n\n"
    "Thank you for your message. We have received your inquiry and will get "
    "back to you within 24 hours.\n\n"
    "Best regards,\n"
    "The Team"
)


class Notifier(Protocol):
    """Mail-sending collaborator."""

    async def notify(self, recipient: str, subject: str, body: str) -> None: ...


class LoggingNotifier:
    """Notifier that only logs the intent to send."""

    async def notify(self, recipient: str, subject: str, body: str) -> None:
        logger.info(f"Email intent: to={recipient} subject={subject!r}")
        logger.debug(f"Email body:\n{body}")


@dataclass
class DispatchResult:
    name: str
    sent: bool = False
    skipped_reason: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def notification_body(record: SubmissionRecord) -> str:
    return (
        f"From: {record.name} <{record.email}>\n"
        f"Service: {record.service}\n\n"
        f"{record.message}"
    )


async def send_notification(
    record: SubmissionRecord, settings_path: Path, notifier: Notifier
) -> DispatchResult:
    """Tell the site owner about a new submission, if an address is configured."""
    result = DispatchResult(name="notification")
    try:
        settings = load_form_settings(settings_path)
        recipient = settings.notification_recipient if settings else None
        if not recipient:
            logger.info("No notification email configured")
            result.skipped_reason = "not configured"
            return result

        await notifier.notify(
            recipient,
            f"New Contact Form Submission from {record.name}",
            notification_body(record),
        )
        result.sent = True
    except Exception as e:
        logger.error(f"Error sending notification email: {type(e).__name__}: {e}", exc_info=e)
        result.error = e
    return result


async def send_auto_reply(
    record: SubmissionRecord, settings_path: Path, notifier: Notifier
) -> DispatchResult:
    """Acknowledge the submission to the sender when auto-reply is enabled."""
    result = DispatchResult(name="auto_reply")
    try:
        settings = load_form_settings(settings_path)
        if settings is None:
            result.skipped_reason = "no settings"
            return result
        if not settings.auto_reply:
            result.skipped_reason = "disabled"
            return result

        await notifier.notify(
            record.email,
            AUTO_REPLY_SUBJECT,
            AUTO_REPLY_BODY.format(name=record.name),
        )
        result.sent = True
    except Exception as e:
        logger.error(f"Error sending auto-reply email: {type(e).__name__}: {e}", exc_info=e)
        result.error = e
    return result


async def dispatch_all(
    record: SubmissionRecord, settings_path: Path, notifier: Notifier
) -> list[DispatchResult]:
    """Run the notification and the auto-reply independently of each other."""
    return [
        await send_notification(record, settings_path, notifier),
        await send_auto_reply(record, settings_path, notifier),
    ]
