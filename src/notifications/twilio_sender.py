import asyncio
from typing import Protocol

from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from src.notifications.base import ChannelSender
from src.notifications.dtos import ChannelDeliveryError, ChannelKind, OutgoingMessage


class TwilioSmsConfig(Protocol):
    twilio_account_sid: str
    twilio_auth_token: str
    twilio_from_number: str


class TwilioSmsSender(ChannelSender):
    channel = ChannelKind.SMS

    def __init__(self, config: TwilioSmsConfig, client: Client | None = None):
        self._config = config
        self._client = client or Client(config.twilio_account_sid, config.twilio_auth_token)

    async def send(self, message: OutgoingMessage) -> str:
        """Send the message body to every recipient phone. Returns the message SIDs."""
        numbers = [recipient.phone for recipient in message.recipients if recipient.phone]
        if not numbers:
            raise ChannelDeliveryError(self.channel, "Recipient has no phone number")

        sids = []
        for number in numbers:
            try:
                # The Twilio client is blocking
                sent = await asyncio.to_thread(
                    self._client.messages.create,
                    body=message.body,
                    from_=self._config.twilio_from_number,
                    to=number,
                )
            except TwilioException as e:
                raise ChannelDeliveryError(self.channel, str(e)) from e
            sids.append(sent.sid)

        return ",".join(sids)
