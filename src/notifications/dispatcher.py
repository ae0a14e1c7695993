"""Fan a logical notification out over independent channels.

Every requested channel is sent concurrently and the call returns once all of
them have resolved. A failure or timeout on one channel is recorded in the
report and never affects the others. There are no retries and no
deduplication: every call generates fresh message ids and sends again.
"""

import asyncio
import logging
from collections.abc import Iterable
from uuid import uuid4

from src.notifications.base import ChannelSender
from src.notifications.dtos import (
    ChannelKind,
    DeliveryAttempt,
    DispatchReport,
    NotificationContent,
    OutgoingMessage,
    Recipient,
)

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    def __init__(
        self,
        senders: Iterable[ChannelSender],
        timeout_seconds: float | None = None,
    ) -> None:
        self._senders: dict[ChannelKind, ChannelSender] = {
            sender.channel: sender for sender in senders
        }
        self._timeout_seconds = timeout_seconds

    @property
    def channels(self) -> frozenset[ChannelKind]:
        """Channels that have a sender configured."""
        return frozenset(self._senders)

    async def dispatch(
        self,
        recipient: Recipient,
        content: NotificationContent,
        channels: Iterable[ChannelKind],
        topics: frozenset[str] = frozenset(),
    ) -> DispatchReport:
        requested = set(channels)
        ordered = [channel for channel in ChannelKind if channel in requested]

        attempts = await asyncio.gather(
            *(self._send_one(channel, recipient, content, topics) for channel in ordered)
        )
        return DispatchReport(attempts=tuple(attempts))

    def _render(
        self,
        channel: ChannelKind,
        message_id: str,
        recipient: Recipient,
        content: NotificationContent,
        topics: frozenset[str],
    ) -> OutgoingMessage:
        if channel == ChannelKind.EMAIL:
            return OutgoingMessage(
                message_id=message_id,
                subject=content.render_subject(),
                body=content.render_body(),
                html_body=content.render_html(),
                recipients=(recipient,),
                topics=topics,
            )
        # SMS carries the body only
        return OutgoingMessage(
            message_id=message_id,
            body=content.render_body(),
            recipients=(recipient,),
            topics=topics,
        )

    async def _send_one(
        self,
        channel: ChannelKind,
        recipient: Recipient,
        content: NotificationContent,
        topics: frozenset[str],
    ) -> DeliveryAttempt:
        message_id = str(uuid4())
        # Summary of the unrendered templates, used when rendering itself fails
        summary = OutgoingMessage(
            message_id=message_id, subject=content.subject, body=content.body, recipients=()
        ).summary
        sender = self._senders.get(channel)

        if sender is None:
            reason = f"No sender configured for channel '{channel.value}'"
            logger.warning(f"Dispatch {message_id} to {recipient.id}: {reason}")
            return self._failed(channel, recipient, message_id, summary, reason)

        try:
            message = self._render(channel, message_id, recipient, content, topics)
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            reason = f"Could not render notification: {e!r}"
            logger.warning(
                f"Dispatch {message_id} over {channel.value} to {recipient.id} failed: {reason}"
            )
            return self._failed(channel, recipient, message_id, summary, reason)
        summary = message.summary

        try:
            if self._timeout_seconds is None:
                handle = await sender.send(message)
            else:
                handle = await asyncio.wait_for(
                    sender.send(message), timeout=self._timeout_seconds
                )
        except asyncio.TimeoutError:
            reason = f"Timed out after {self._timeout_seconds}s"
            logger.warning(
                f"Dispatch {message_id} over {channel.value} to {recipient.id} failed: {reason}"
            )
            return self._failed(channel, recipient, message_id, summary, reason)
        except Exception as e:
            logger.warning(
                f"Dispatch {message_id} over {channel.value} to {recipient.id} failed: {e}"
            )
            return self._failed(channel, recipient, message_id, summary, str(e))

        logger.info(
            f"Dispatch {message_id} over {channel.value} to {recipient.id} delivered: {handle}"
        )
        return DeliveryAttempt(
            channel=channel,
            message_id=message_id,
            recipient_id=recipient.id,
            summary=summary,
            delivered=True,
            handle=handle,
        )

    @staticmethod
    def _failed(
        channel: ChannelKind,
        recipient: Recipient,
        message_id: str,
        summary: str,
        reason: str,
    ) -> DeliveryAttempt:
        return DeliveryAttempt(
            channel=channel,
            message_id=message_id,
            recipient_id=recipient.id,
            summary=summary,
            delivered=False,
            reason=reason,
        )
