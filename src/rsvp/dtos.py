from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from src.errors import DeliveryError, DependencyError, InvitationError, ValidationError
from src.notifications.dtos import DispatchReport

RESPONSE_REQUIRED_MESSAGE = "Please select whether you are accepting or declining the invitation"


class RSVPAnswer(str, Enum):
    GOING = "going"
    NOT_GOING = "not-going"
    # Implicit state before an invitee answers; never accepted as a submission
    PENDING = "pending"

    @property
    def status_label(self) -> str:
        return {
            RSVPAnswer.GOING: "Accepted",
            RSVPAnswer.NOT_GOING: "Declined",
            RSVPAnswer.PENDING: "Pending",
        }[self]


class RSVPError(InvitationError):
    """Base class for RSVP submission errors."""


class ResponseRequiredError(RSVPError, ValidationError):
    def __init__(self, response: str | None = None) -> None:
        self.response = response
        super().__init__(RESPONSE_REQUIRED_MESSAGE)


class EventNotFoundError(RSVPError):
    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")


class RSVPStoreError(RSVPError, DependencyError):
    """Raised when the RSVP store cannot record or list responses."""


@dataclass(frozen=True)
class RSVPContactDTO:
    """Contact details captured by the RSVP form. Not tied to an invitee record."""

    name: str
    email: str
    phone: str | None = None


@dataclass(frozen=True)
class RSVPRecordDTO:
    """DTO for one stored RSVP submission."""

    id: UUID
    event_id: UUID
    name: str
    email: str
    phone: str | None
    response: RSVPAnswer
    created_at: datetime


@dataclass(frozen=True)
class RSVPAckDTO:
    """DTO returned once a submission has been recorded."""

    record: RSVPRecordDTO
    confirmation_report: DispatchReport

    @property
    def confirmation_sent(self) -> bool:
        return self.confirmation_report.all_delivered


class ConfirmationNotSentError(RSVPError, DeliveryError):
    """The RSVP was recorded but its confirmation email was not delivered.

    This is a partial success: ``ack`` holds the stored record, which is not
    rolled back.
    """

    def __init__(self, ack: RSVPAckDTO) -> None:
        self.ack = ack
        reasons = "; ".join(
            failure.reason or "unknown error" for failure in ack.confirmation_report.failures
        )
        super().__init__(f"RSVP recorded but confirmation was not sent: {reasons}")


def latest_per_email(records: list[RSVPRecordDTO]) -> list[RSVPRecordDTO]:
    """Collapse an append-only response log to the latest submission per email.

    Records must be ordered oldest first. Emails are compared case-insensitively.
    """
    latest: dict[str, RSVPRecordDTO] = {}
    for record in records:
        latest[record.email.lower()] = record
    return sorted(latest.values(), key=lambda record: record.created_at)
