"""
Mail transport interface (Port).

Defines the contract for delivering an email message.
The infrastructure layer provides the adapter implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class MailMessage:
    """An outgoing email: sender, recipient, subject and bodies."""

    sender: str
    recipient: str
    subject: str
    html: str
    text: str | None = None


@dataclass(frozen=True)
class DeliveryReceipt:
    """Acknowledgment returned by the relay once it accepted a message."""

    message_id: str
    response: str = ""


class MailTransportError(Exception):
    """Raised when a message could not be handed to the mail relay."""

    pass


class MailTransport(ABC):
    """
    Abstract interface for outbound mail delivery.

    This is a "port" in Hexagonal Architecture.
    The infrastructure layer provides the concrete adapter (SMTP relay),
    tests provide an in-memory one.
    """

    @abstractmethod
    async def send(self, message: MailMessage) -> DeliveryReceipt:
        """
        Deliver a message to the relay.

        Args:
            message: The message to send

        Returns:
            DeliveryReceipt carrying the message identifier

        Raises:
            MailTransportError: On authentication, network or recipient errors
        """
        pass

    @abstractmethod
    async def verify(self) -> None:
        """
        Check that the relay is reachable and accepts our credentials.

        Raises:
            MailTransportError: If the relay cannot be used
        """
        pass
