from functools import lru_cache

from src.config.settings import settings
from src.notifications.base import ChannelSender
from src.notifications.dispatcher import NotificationDispatcher
from src.notifications.dtos import (
    ChannelKind,
    DispatchReport,
    NotificationContent,
    Recipient,
)
from src.notifications.resend_sender import ResendEmailSender
from src.notifications.smtp_sender import SMTPEmailSender
from src.notifications.templates import NotificationTemplates
from src.notifications.twilio_sender import TwilioSmsSender


def get_email_sender() -> ChannelSender:
    if settings.resend_api_key:
        return ResendEmailSender(config=settings)
    return SMTPEmailSender(config=settings)


def get_sms_sender() -> ChannelSender | None:
    if settings.twilio_account_sid:
        return TwilioSmsSender(config=settings)
    return None


@lru_cache
def get_dispatcher() -> NotificationDispatcher:
    """Process-wide dispatcher; senders are built once and reused across requests."""
    senders = [get_email_sender()]
    sms_sender = get_sms_sender()
    if sms_sender is not None:
        senders.append(sms_sender)
    return NotificationDispatcher(
        senders=senders,
        timeout_seconds=settings.notification_timeout_seconds,
    )


def get_welcome_channels() -> frozenset[ChannelKind]:
    return frozenset(ChannelKind(channel) for channel in settings.welcome_channels)


__all__ = [
    "ChannelKind",
    "ChannelSender",
    "DispatchReport",
    "NotificationContent",
    "NotificationDispatcher",
    "NotificationTemplates",
    "Recipient",
    "get_dispatcher",
    "get_email_sender",
    "get_sms_sender",
    "get_welcome_channels",
]
