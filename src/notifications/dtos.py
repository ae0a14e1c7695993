from dataclasses import dataclass, field
from enum import Enum
from html import escape

from src.errors import DeliveryError


class ChannelKind(str, Enum):
    EMAIL = "email"
    SMS = "sms"


class ChannelDeliveryError(DeliveryError):
    """Raised by a channel sender when the provider did not accept a message."""

    def __init__(self, channel: ChannelKind, reason: str) -> None:
        self.channel = channel
        self.reason = reason
        super().__init__(f"{channel.value} delivery failed: {reason}")


@dataclass(frozen=True)
class Recipient:
    """Who a notification is addressed to.

    ``id`` is the invitee id when the recipient is a registered invitee. RSVP
    confirmations go to whoever filled the form, so it can be None.
    """

    email: str | None = None
    phone: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class NotificationContent:
    """One logical notification, rendered per channel by the dispatcher."""

    body: str
    subject: str | None = None
    html_body: str | None = None
    template_variables: dict[str, str] = field(default_factory=dict)

    def render_subject(self) -> str | None:
        if self.subject is None:
            return None
        return self.subject.format(**self.template_variables)

    def render_body(self) -> str:
        return self.body.format(**self.template_variables)

    def render_html(self) -> str | None:
        if self.html_body is None:
            return None
        escaped = {key: escape(str(value)) for key, value in self.template_variables.items()}
        return self.html_body.format(**escaped)


@dataclass(frozen=True)
class OutgoingMessage:
    """Channel-specific rendering of a NotificationContent handed to a sender."""

    message_id: str
    body: str
    recipients: tuple[Recipient, ...]
    subject: str | None = None
    html_body: str | None = None
    topics: frozenset[str] = frozenset()

    @property
    def summary(self) -> str:
        text = self.subject or self.body
        return text if len(text) <= 60 else f"{text[:57]}..."


@dataclass(frozen=True)
class DeliveryAttempt:
    """Outcome of sending one message over one channel. Never persisted."""

    channel: ChannelKind
    message_id: str
    recipient_id: str | None
    summary: str
    delivered: bool
    handle: str | None = None
    reason: str | None = None


@dataclass(frozen=True)
class DispatchReport:
    """Per-channel outcomes of a single dispatch call."""

    attempts: tuple[DeliveryAttempt, ...] = ()

    @property
    def delivered(self) -> list[DeliveryAttempt]:
        return [attempt for attempt in self.attempts if attempt.delivered]

    @property
    def failures(self) -> list[DeliveryAttempt]:
        return [attempt for attempt in self.attempts if not attempt.delivered]

    @property
    def all_delivered(self) -> bool:
        return bool(self.attempts) and not self.failures

    def outcome_for(self, channel: ChannelKind) -> DeliveryAttempt | None:
        for attempt in self.attempts:
            if attempt.channel == channel:
                return attempt
        return None
