from abc import ABC, abstractmethod


class IEmailSender(ABC):
    """Email delivery collaborator"""

    @abstractmethod
    async def send(self, to: str, subject: str, html_body: str) -> bool:
        """
        Deliver a rendered message.

        Returns True if the message was handed to a mail server,
        False if it was only logged.
        """
        pass
