from abc import ABC, abstractmethod
from uuid import UUID

from src.events.repository.read_models import EventReadModel
from src.rsvp.dtos import EventNotFoundError, RSVPRecordDTO, latest_per_email
from src.rsvp.repository.store import RSVPStore


class RSVPListReadModel(ABC):
    @abstractmethod
    async def list_responses(self, event_id: UUID, latest_only: bool = False) -> list[RSVPRecordDTO]:
        """
        List RSVP submissions for an event, oldest first.
        With latest_only, keep only the most recent submission per email.
        """
        raise NotImplementedError


class StoreRSVPListReadModel(RSVPListReadModel):
    def __init__(self, store: RSVPStore, event_read_model: EventReadModel) -> None:
        self.store = store
        self.event_read_model = event_read_model

    async def list_responses(self, event_id: UUID, latest_only: bool = False) -> list[RSVPRecordDTO]:
        if await self.event_read_model.get_by_id(event_id) is None:
            raise EventNotFoundError(event_id)

        records = await self.store.list_by_event(event_id)
        if latest_only:
            return latest_per_email(records)
        return records
