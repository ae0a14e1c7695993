from abc import ABC, abstractmethod

from src.notifications.dtos import ChannelKind, OutgoingMessage


class ChannelSender(ABC):
    """A notification transport for one channel kind."""

    channel: ChannelKind

    @abstractmethod
    async def send(self, message: OutgoingMessage) -> str:
        """
        Send a message to its recipients.

        Returns:
            The provider's handle for the sent message

        Raises:
            ChannelDeliveryError: when the provider rejects or cannot be reached
        """
        pass
