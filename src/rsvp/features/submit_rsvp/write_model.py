"""Write model for RSVP submission.

A submission is recorded first and confirmed second. The recorded decision is
durable on its own: a confirmation email that cannot be delivered is reported
as ConfirmationNotSentError but the record stays.
"""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from src.events.repository.read_models import EventReadModel
from src.notifications import NotificationDispatcher, NotificationTemplates, Recipient
from src.notifications.dtos import ChannelKind
from src.rsvp.dtos import (
    ConfirmationNotSentError,
    EventNotFoundError,
    ResponseRequiredError,
    RSVPAckDTO,
    RSVPAnswer,
    RSVPContactDTO,
)
from src.rsvp.repository.store import RSVPStore

logger = logging.getLogger(__name__)

# The form posts the string "null" when nothing was selected
_UNANSWERED = {"", "null", RSVPAnswer.PENDING.value}

CONFIRMATION_CHANNELS = frozenset({ChannelKind.EMAIL})


def require_answer(response: RSVPAnswer | str | None) -> RSVPAnswer:
    """Return the explicit answer or raise ResponseRequiredError."""
    if response is None:
        raise ResponseRequiredError(None)

    value = response.value if isinstance(response, RSVPAnswer) else response.strip().lower()
    if value in _UNANSWERED:
        raise ResponseRequiredError(value)

    try:
        return RSVPAnswer(value)
    except ValueError as e:
        raise ResponseRequiredError(value) from e


class RSVPWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(
        self,
        event_id: UUID,
        contact: RSVPContactDTO,
        response: RSVPAnswer | str | None,
    ) -> RSVPAckDTO:
        """
        Record an RSVP and send the confirmation email.

        Raises:
            ResponseRequiredError: response is missing or pending; nothing recorded
            EventNotFoundError: event_id does not resolve; nothing recorded
            RSVPStoreError: the store rejected the write
            ConfirmationNotSentError: recorded, but the confirmation failed
        """
        raise NotImplementedError


class RSVPLifecycleManager(RSVPWriteModel):
    def __init__(
        self,
        store: RSVPStore,
        event_read_model: EventReadModel,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self.store = store
        self.event_read_model = event_read_model
        self.dispatcher = dispatcher

    async def submit_rsvp(
        self,
        event_id: UUID,
        contact: RSVPContactDTO,
        response: RSVPAnswer | str | None,
    ) -> RSVPAckDTO:
        answer = require_answer(response)

        event = await self.event_read_model.get_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        record = await self.store.append(event_id=event.id, contact=contact, response=answer)
        logger.info(f"Recorded RSVP {record.id} ({answer.value}) for event {event.id}")

        # Email only; the phone number is collected but not used for confirmations
        report = await self.dispatcher.dispatch(
            recipient=Recipient(email=contact.email),
            content=NotificationTemplates.rsvp_confirmation(
                to_name=contact.name,
                event_name=event.name,
                event_date=event.formatted_date,
                event_location=event.location or "TBA",
                response_status=answer.status_label,
            ),
            channels=CONFIRMATION_CHANNELS,
        )

        ack = RSVPAckDTO(record=record, confirmation_report=report)
        if not ack.confirmation_sent:
            error = ConfirmationNotSentError(ack)
            logger.warning(f"RSVP {record.id}: {error.message}")
            raise error

        return ack
