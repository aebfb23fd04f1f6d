"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.

Expected business failures (invalid input, a taken username) are never
raised: they are reported through a use case outcome and its error
collection. The classes below cover programming mistakes and
infrastructure conditions that may be retried.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UsageError(DomainError):
    """Raised when a use case or model is driven in an unsupported way."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnknownAttributeError(UsageError):
    """Raised when assigning a name that was never declared as an attribute."""

    def __init__(self, owner: str, name: str):
        message = f"Unknown attribute '{name}' for {owner}"
        super().__init__(message, details={"owner": owner, "attribute": name})
        self.name = name


class RecoverableError(DomainError):
    """Transient failure that is safe to retry once."""


class RecordNotUniqueError(RecoverableError):
    """Raised when storing a record collides with an existing unique key."""

    def __init__(self, field: str, value: Any):
        message = f"A record with {field}={value!r} already exists"
        super().__init__(message, details={"field": field, "value": value})
        self.field = field
