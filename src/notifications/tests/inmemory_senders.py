"""In-memory channel senders for tests."""

import asyncio

from src.notifications.base import ChannelSender
from src.notifications.dtos import ChannelDeliveryError, ChannelKind, OutgoingMessage


class InMemorySender(ChannelSender):
    """Records every message it is asked to send.

    With ``fail_with`` set, every send raises ChannelDeliveryError with that reason.
    """

    def __init__(self, channel: ChannelKind, fail_with: str | None = None):
        self.channel = channel
        self.fail_with = fail_with
        self.sent: list[OutgoingMessage] = []

    async def send(self, message: OutgoingMessage) -> str:
        if self.fail_with:
            raise ChannelDeliveryError(self.channel, self.fail_with)
        self.sent.append(message)
        return f"{self.channel.value}-{len(self.sent)}"


class SlowSender(InMemorySender):
    """Sleeps before recording, to exercise dispatch timeouts."""

    def __init__(self, channel: ChannelKind, delay_seconds: float):
        super().__init__(channel)
        self.delay_seconds = delay_seconds

    async def send(self, message: OutgoingMessage) -> str:
        await asyncio.sleep(self.delay_seconds)
        return await super().send(message)


class CrashingSender(InMemorySender):
    """Raises an unexpected exception instead of a ChannelDeliveryError."""

    async def send(self, message: OutgoingMessage) -> str:
        raise RuntimeError("provider client crashed")


class RendezvousSender(InMemorySender):
    """Waits until every sender sharing ``started`` has begun sending.

    Sends that run one after another never meet, so ``send`` times out.
    """

    def __init__(self, channel: ChannelKind, started: list, expected: int, wait_seconds: float = 1.0):
        super().__init__(channel)
        self.started = started
        self.expected = expected
        self.wait_seconds = wait_seconds

    async def send(self, message: OutgoingMessage) -> str:
        self.started.append(self.channel)
        async with asyncio.timeout(self.wait_seconds):
            while len(self.started) < self.expected:
                await asyncio.sleep(0.001)
        return await super().send(message)
