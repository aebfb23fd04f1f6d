"""Domain ports package."""

from .mailer import IMailer

__all__ = ["IMailer"]
