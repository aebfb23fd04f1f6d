"""Infrastructure services package."""

from .logging_mailer import LoggingMailer, OutgoingMessage

__all__ = ["LoggingMailer", "OutgoingMessage"]
