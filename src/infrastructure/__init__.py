"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as storage and
outbound e-mail.
"""

from src.infrastructure import repositories, services

__all__ = ["repositories", "services"]
