"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    DomainError,
    RecordNotUniqueError,
    RecoverableError,
    UnknownAttributeError,
    UsageError,
)
from .user import User

__all__ = [
    "User",
    "DomainError",
    "UsageError",
    "UnknownAttributeError",
    "RecoverableError",
    "RecordNotUniqueError",
]
