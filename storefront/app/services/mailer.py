from abc import ABC, abstractmethod


class MailDeliveryError(Exception):
    """Raised when an outbound email could not be handed to the mail server"""


class Mailer(ABC):
    """Outbound email collaborator"""

    @abstractmethod
    async def send(self, recipient: str, subject: str, body: str) -> None:
        """Send an HTML email. Raises MailDeliveryError on failure."""
        pass
