"""Identity directory: the system of record for invitees.

Returns DTOs, never ORM models.
"""

from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.invitees.dtos import DirectoryUnavailableError, DuplicateInviteeError, InviteeDTO
from src.invitees.repository.orm_models import Invitee


class IdentityDirectory(ABC):
    @abstractmethod
    async def create(self, invitee_id: UUID, email: str, phone: str) -> InviteeDTO:
        """Create an invitee record.

        Raises:
            DuplicateInviteeError: an invitee with this email already exists
            DirectoryUnavailableError: the directory could not be reached
        """
        raise NotImplementedError

    @abstractmethod
    async def list_invitees(self) -> list[InviteeDTO]:
        """Return every invitee record."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_email_and_phone(self, email: str, phone: str) -> InviteeDTO | None:
        """Return the invitee matching both fields exactly, or None."""
        raise NotImplementedError


class SqlIdentityDirectory(IdentityDirectory):
    """SQL implementation of the identity directory."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create(self, invitee_id: UUID, email: str, phone: str) -> InviteeDTO:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                invitee = Invitee(uuid=invitee_id, email=email, phone=phone)
                session.add(invitee)
                await session.flush()
        except IntegrityError as e:
            raise DuplicateInviteeError(email) from e
        except (SQLAlchemyError, OSError) as e:
            raise DirectoryUnavailableError(f"Identity directory unavailable: {e}") from e

        return InviteeDTO(id=invitee_id, email=email, phone=phone)

    async def list_invitees(self) -> list[InviteeDTO]:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                result = await session.execute(select(Invitee).order_by(Invitee.created_at))
                invitees = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            raise DirectoryUnavailableError(f"Identity directory unavailable: {e}") from e

        return [self._to_dto(invitee) for invitee in invitees]

    async def find_by_email_and_phone(self, email: str, phone: str) -> InviteeDTO | None:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                result = await session.execute(
                    select(Invitee).where(Invitee.email == email, Invitee.phone == phone)
                )
                invitee = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise DirectoryUnavailableError(f"Identity directory unavailable: {e}") from e

        return self._to_dto(invitee) if invitee else None

    @staticmethod
    def _to_dto(invitee: Invitee) -> InviteeDTO:
        return InviteeDTO(id=invitee.uuid, email=invitee.email, phone=invitee.phone)


def get_identity_directory() -> IdentityDirectory:
    """Dependency to get the identity directory instance."""
    return SqlIdentityDirectory()
