"""RSVP store - append-only log of RSVP submissions. Returns DTOs, never ORM models."""

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from functools import partial
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.rsvp.dtos import RSVPAnswer, RSVPContactDTO, RSVPRecordDTO, RSVPStoreError
from src.rsvp.repository.orm_models import RSVPResponse


class RSVPStore(ABC):
    @abstractmethod
    async def append(
        self,
        event_id: UUID,
        contact: RSVPContactDTO,
        response: RSVPAnswer,
    ) -> RSVPRecordDTO:
        """Record a submission. Earlier submissions for the same email are kept."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_event(self, event_id: UUID) -> list[RSVPRecordDTO]:
        """All submissions for an event, oldest first."""
        raise NotImplementedError


class SqlRSVPStore(RSVPStore):
    """SQL implementation of the RSVP store."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def append(
        self,
        event_id: UUID,
        contact: RSVPContactDTO,
        response: RSVPAnswer,
    ) -> RSVPRecordDTO:
        record = RSVPRecordDTO(
            id=uuid4(),
            event_id=event_id,
            name=contact.name,
            email=contact.email,
            phone=contact.phone,
            response=response,
            created_at=datetime.now(UTC),
        )

        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                session.add(
                    RSVPResponse(
                        uuid=record.id,
                        event_id=record.event_id,
                        name=record.name,
                        email=record.email,
                        phone=record.phone,
                        response=record.response,
                        created_at=record.created_at,
                    )
                )
                await session.flush()
        except (SQLAlchemyError, OSError) as e:
            raise RSVPStoreError(f"Could not record RSVP: {e}") from e

        return record

    async def list_by_event(self, event_id: UUID) -> list[RSVPRecordDTO]:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                result = await session.execute(
                    select(RSVPResponse)
                    .where(RSVPResponse.event_id == event_id)
                    .order_by(RSVPResponse.created_at)
                )
                rows = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            raise RSVPStoreError(f"Could not list RSVPs: {e}") from e

        return [
            RSVPRecordDTO(
                id=row.uuid,
                event_id=row.event_id,
                name=row.name,
                email=row.email,
                phone=row.phone,
                response=RSVPAnswer(row.response),
                created_at=row.created_at,
            )
            for row in rows
        ]


def get_rsvp_store() -> RSVPStore:
    """Dependency to get RSVP store instance."""
    return SqlRSVPStore()
