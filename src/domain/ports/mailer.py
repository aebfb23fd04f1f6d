"""Port for outbound account notifications."""

from abc import ABC, abstractmethod

from src.domain.entities.user import User


class IMailer(ABC):
    """Delivers account e-mails."""

    @abstractmethod
    def deliver_welcome(self, user: User) -> None:
        """Send the welcome message to a newly registered user."""
