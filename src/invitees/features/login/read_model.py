"""Read model for the login feature.

This is a lookup on two non-secret fields, not authentication: there is no
password or token. Do not rely on it to protect anything until a real
credential mechanism exists.
"""

from abc import ABC, abstractmethod

from src.invitees.dtos import InviteeNotFoundError, InviteeSummaryDTO, MissingCredentialsError
from src.invitees.repository.directory import IdentityDirectory


class LoginReadModel(ABC):
    @abstractmethod
    async def authenticate(self, email: str | None, phone: str | None) -> InviteeSummaryDTO:
        """
        Match an invitee on exact email and phone.

        Raises:
            MissingCredentialsError: either field is empty
            InviteeNotFoundError: no invitee matches both fields
        """
        raise NotImplementedError


class DirectoryLoginReadModel(LoginReadModel):
    def __init__(self, directory: IdentityDirectory) -> None:
        self.directory = directory

    async def authenticate(self, email: str | None, phone: str | None) -> InviteeSummaryDTO:
        if not email or not phone:
            raise MissingCredentialsError()

        invitee = await self.directory.find_by_email_and_phone(email=email, phone=phone)
        if invitee is None:
            raise InviteeNotFoundError()

        return InviteeSummaryDTO.from_invitee(invitee)
