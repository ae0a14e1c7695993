"""Write model for the register feature.

Validates input, creates the directory record, then sends the welcome
notification. The invitee exists as soon as the directory accepted it, so a
notification provider being down never fails a registration.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from uuid import uuid4

from src.invitees.dtos import RegisteredInviteeDTO
from src.invitees.repository.directory import IdentityDirectory
from src.invitees.validator import validate_invitee
from src.notifications import NotificationDispatcher, NotificationTemplates, Recipient
from src.notifications.dtos import ChannelKind

logger = logging.getLogger(__name__)


class RegisterWriteModel(ABC):
    """Abstract base class for invitee registration."""

    @abstractmethod
    async def register(self, email: str | None, phone: str | None) -> RegisteredInviteeDTO:
        """Register a new invitee and send the welcome notification.

        Raises:
            ValidationError: input is malformed; nothing was created
            DirectoryError: the directory refused or could not be reached
        """
        raise NotImplementedError


class DirectoryRegisterWriteModel(RegisterWriteModel):
    def __init__(
        self,
        directory: IdentityDirectory,
        dispatcher: NotificationDispatcher,
        channels: Iterable[ChannelKind],
    ) -> None:
        self.directory = directory
        self.dispatcher = dispatcher
        self.channels = frozenset(channels)

    async def register(self, email: str | None, phone: str | None) -> RegisteredInviteeDTO:
        valid = validate_invitee(email=email, phone=phone)

        invitee = await self.directory.create(
            invitee_id=uuid4(),
            email=valid.email,
            phone=valid.phone,
        )
        logger.info(f"Registered invitee {invitee.id}")

        report = await self.dispatcher.dispatch(
            recipient=Recipient(id=str(invitee.id), email=invitee.email, phone=invitee.phone),
            content=NotificationTemplates.welcome(invitee.email),
            channels=self.channels,
        )
        for failure in report.failures:
            logger.warning(
                f"Welcome {failure.channel.value} for invitee {invitee.id} not sent: {failure.reason}"
            )

        return RegisteredInviteeDTO(invitee=invitee, welcome_report=report)
