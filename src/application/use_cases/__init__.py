"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Every use case derives from :class:`UseCase` and is
run through its ``invoke`` class method.
"""

from .base import Outcome, UseCase
from .sign_up_use_case import SignUpUseCase

__all__ = [
    "Outcome",
    "UseCase",
    "SignUpUseCase",
]
