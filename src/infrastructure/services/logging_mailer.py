"""Mailer that records outgoing messages and logs each delivery."""

from dataclasses import dataclass
from typing import List

from src.domain.entities.user import User
from src.domain.ports.mailer import IMailer
from src.shared import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class OutgoingMessage:
    """An e-mail handed to the mailer."""

    sender: str
    recipient: str
    subject: str
    body: str


class LoggingMailer(IMailer):
    """IMailer implementation that keeps an outbox instead of sending."""

    def __init__(self, sender: str, welcome_subject: str):
        self.sender = sender
        self.welcome_subject = welcome_subject
        self.outbox: List[OutgoingMessage] = []

    def deliver_welcome(self, user: User) -> None:
        message = OutgoingMessage(
            sender=self.sender,
            recipient=user.email,
            subject=self.welcome_subject,
            body=f"Hi {user.username}, your account is ready.",
        )
        self.outbox.append(message)
        logger.info(
            "mailer.welcome_delivered",
            recipient=message.recipient,
            user_id=str(user.id),
        )
