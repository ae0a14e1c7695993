import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.errors import DependencyError
from src.events.repository.read_models import EventReadModel, get_event_read_model
from src.notifications import NotificationDispatcher, get_dispatcher
from src.routers.errors import ErrorResponse, error_response
from src.rsvp.dtos import (
    ConfirmationNotSentError,
    EventNotFoundError,
    ResponseRequiredError,
    RSVPAckDTO,
    RSVPAnswer,
    RSVPContactDTO,
)
from src.rsvp.features.submit_rsvp.dtos import SubmitRSVPRequest, SubmitRSVPResponse
from src.rsvp.features.submit_rsvp.write_model import RSVPLifecycleManager, RSVPWriteModel
from src.rsvp.repository.store import RSVPStore, get_rsvp_store
from src.rsvp.urls import SUBMIT_RSVP_URL

logger = logging.getLogger(__name__)

router = APIRouter()


def get_rsvp_write_model(
    store: RSVPStore = Depends(get_rsvp_store),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return RSVPLifecycleManager(
        store=store,
        event_read_model=event_read_model,
        dispatcher=dispatcher,
    )


def _build_response(ack: RSVPAckDTO) -> SubmitRSVPResponse:
    if not ack.confirmation_sent:
        message = "Your response has been recorded, but we could not send the confirmation email."
    elif ack.record.response == RSVPAnswer.GOING:
        message = "Thank you for confirming your attendance!"
    else:
        message = "We're sorry you can't make it. Your response has been recorded."

    return SubmitRSVPResponse(
        rsvp_id=ack.record.id,
        message=message,
        response=ack.record.response.value,
        confirmation_sent=ack.confirmation_sent,
    )


@router.post(
    SUBMIT_RSVP_URL,
    response_model=SubmitRSVPResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_rsvp(
    event_id: UUID,
    rsvp_data: SubmitRSVPRequest,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
):
    """
    Record an attendance response for an event and email a confirmation.

    A confirmation that cannot be delivered does not fail the request; the
    response reports it with confirmation_sent=false.
    """
    contact = RSVPContactDTO(
        name=rsvp_data.name,
        email=rsvp_data.email,
        phone=rsvp_data.phone,
    )

    try:
        ack = await write_model.submit_rsvp(
            event_id=event_id,
            contact=contact,
            response=rsvp_data.response,
        )
    except ResponseRequiredError as e:
        return error_response(400, e.message)
    except EventNotFoundError as e:
        return error_response(404, e.message)
    except ConfirmationNotSentError as e:
        ack = e.ack
    except DependencyError as e:
        logger.error(f"RSVP for event {event_id} failed: {e}")
        return error_response(500, e.message)
    except Exception as e:
        logger.exception(f"Unexpected failure recording RSVP for event {event_id}")
        return error_response(500, str(e))

    return _build_response(ack)
