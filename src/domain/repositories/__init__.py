"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .user_repository import IUserRepository

__all__ = ["IUserRepository"]
