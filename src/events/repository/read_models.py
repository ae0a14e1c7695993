import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import EventDTO, EventLookupError
from src.events.repository.orm_models import Event


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_by_id(self, event_id: UUID) -> EventDTO | None:
        """Get an event by id. Returns None if it does not exist."""
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    """SQL implementation of event read model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_by_id(self, event_id: UUID) -> EventDTO | None:
        try:
            async with async_session_manager(session_overwrite=self.session_overwrite) as session:
                result = await session.execute(select(Event).where(Event.uuid == event_id))
                event = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise EventLookupError(f"Could not load event {event_id}: {e}") from e

        if not event:
            return None

        return EventDTO(
            id=event.uuid,
            name=event.name,
            location=event.location,
            starts_at=event.starts_at,
            ends_at=event.ends_at,
            capacity=event.capacity,
            description=event.description,
        )


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()
