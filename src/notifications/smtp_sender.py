import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Protocol

from src.notifications.base import ChannelSender
from src.notifications.dtos import ChannelDeliveryError, ChannelKind, OutgoingMessage


class SMTPEmailConfig(Protocol):
    smtp_host: str
    smtp_port: int
    smtp_user: str
    smtp_password: str
    emails_from: str


class SMTPEmailSender(ChannelSender):
    channel = ChannelKind.EMAIL

    def __init__(self, config: SMTPEmailConfig, smtp_class: type[smtplib.SMTP] = smtplib.SMTP):
        self.host = config.smtp_host
        self.port = config.smtp_port
        self.username = config.smtp_user
        self.password = config.smtp_password
        self.from_address = config.emails_from
        self._smtp_class = smtp_class

    def _create_message(self, message: OutgoingMessage, to_addresses: list[str]) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject or ""
        msg["From"] = self.from_address
        msg["To"] = ", ".join(to_addresses)
        domain = self.from_address.rsplit("@", 1)[-1]
        msg["Message-ID"] = f"<{message.message_id}@{domain}>"

        msg.attach(MIMEText(message.body, "plain"))
        if message.html_body:
            msg.attach(MIMEText(message.html_body, "html"))

        return msg

    def _send(self, msg: MIMEMultipart) -> None:
        if self.username and self.password:
            with self._smtp_class(self.host, self.port) as server:
                server.starttls()
                server.login(self.username, self.password)
                server.send_message(msg)
        else:
            # For development/testing without authentication (e.g. Mailhog)
            with self._smtp_class(self.host, self.port) as server:
                server.send_message(msg)

    async def send(self, message: OutgoingMessage) -> str:
        to_addresses = [recipient.email for recipient in message.recipients if recipient.email]
        if not to_addresses:
            raise ChannelDeliveryError(self.channel, "Recipient has no email address")

        msg = self._create_message(message, to_addresses)
        try:
            await asyncio.to_thread(self._send, msg)
        except (smtplib.SMTPException, OSError) as e:
            raise ChannelDeliveryError(self.channel, str(e)) from e

        return msg["Message-ID"]
