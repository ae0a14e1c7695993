import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.errors import DependencyError
from src.events.repository.read_models import EventReadModel, get_event_read_model
from src.routers.errors import ErrorResponse, error_response
from src.rsvp.dtos import EventNotFoundError
from src.rsvp.features.list_rsvps.read_model import RSVPListReadModel, StoreRSVPListReadModel
from src.rsvp.repository.store import RSVPStore, get_rsvp_store
from src.rsvp.urls import LIST_RSVPS_URL

logger = logging.getLogger(__name__)

router = APIRouter()


class RSVPRecordResponse(BaseModel):
    id: UUID
    name: str
    email: str
    phone: str | None = None
    response: str
    created_at: datetime


def get_rsvp_list_read_model(
    store: RSVPStore = Depends(get_rsvp_store),
    event_read_model: EventReadModel = Depends(get_event_read_model),
) -> RSVPListReadModel:
    """Dependency to get RSVP list read model instance."""
    return StoreRSVPListReadModel(store=store, event_read_model=event_read_model)


@router.get(
    LIST_RSVPS_URL,
    response_model=list[RSVPRecordResponse],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def list_rsvps(
    event_id: UUID,
    latest_only: bool = False,
    read_model: RSVPListReadModel = Depends(get_rsvp_list_read_model),
):
    """List RSVP submissions for an event, optionally only the latest one per email."""
    try:
        records = await read_model.list_responses(event_id, latest_only=latest_only)
    except EventNotFoundError as e:
        return error_response(404, e.message)
    except DependencyError as e:
        logger.error(f"Listing RSVPs for event {event_id} failed: {e}")
        return error_response(500, e.message)
    except Exception as e:
        logger.exception(f"Unexpected failure listing RSVPs for event {event_id}")
        return error_response(500, str(e))

    return [
        RSVPRecordResponse(
            id=record.id,
            name=record.name,
            email=record.email,
            phone=record.phone,
            response=record.response.value,
            created_at=record.created_at,
        )
        for record in records
    ]
