"""
User Repository Interface

This module defines the interface for user repositories following
the repository pattern. Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.user import User


class IUserRepository(ABC):
    """Interface for User repository implementations."""

    @abstractmethod
    def exists_with_username(self, username: str) -> bool:
        """
        Check whether a username is already registered.

        Args:
            username: Username to look up (case-insensitive)

        Returns:
            True if an account already uses the username
        """
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """
        Find a user by username.

        Args:
            username: Username to look up (case-insensitive)

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Persist a new user.

        Args:
            user: The user to store

        Returns:
            The stored user

        Raises:
            RecordNotUniqueError: If the username was stored concurrently
        """
        pass
