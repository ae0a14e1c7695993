from typing import Protocol

import httpx

from src.notifications.base import ChannelSender
from src.notifications.dtos import ChannelDeliveryError, ChannelKind, OutgoingMessage

RESEND_EMAILS_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str
    emails_from: str


class ResendEmailSender(ChannelSender):
    channel = ChannelKind.EMAIL

    def __init__(
        self,
        config: ResendEmailConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    def _build_payload(self, message: OutgoingMessage, to_addresses: list[str]) -> dict:
        payload = {
            "from": self._config.emails_from,
            "to": to_addresses,
            "subject": message.subject or "",
            "text": message.body,
            # Lets duplicate dispatches be told apart in the Resend dashboard
            "headers": {"X-Entity-Ref-ID": message.message_id},
        }
        if message.html_body:
            payload["html"] = message.html_body
        if message.topics:
            payload["tags"] = [{"name": topic, "value": "true"} for topic in sorted(message.topics)]
        return payload

    async def send(self, message: OutgoingMessage) -> str:
        """Send email via Resend and return the Resend email id."""
        to_addresses = [recipient.email for recipient in message.recipients if recipient.email]
        if not to_addresses:
            raise ChannelDeliveryError(self.channel, "Recipient has no email address")

        try:
            async with self._http_client_class() as client:
                response = await client.post(
                    RESEND_EMAILS_URL,
                    headers={
                        "Authorization": f"Bearer {self._config.resend_api_key}",
                        "Content-Type": "application/json",
                    },
                    json=self._build_payload(message, to_addresses),
                )
                response.raise_for_status()
                response_data = response.json()
        except httpx.HTTPError as e:
            raise ChannelDeliveryError(self.channel, str(e)) from e

        return response_data.get("id") or message.message_id
