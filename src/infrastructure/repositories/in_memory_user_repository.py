"""
In-Memory User Repository - Infrastructure Layer

This module implements the IUserRepository interface with a dictionary
keyed by the case-folded username.
"""

from threading import Lock
from typing import Dict, Optional

from src.domain.entities.errors import RecordNotUniqueError
from src.domain.entities.user import User
from src.domain.repositories.user_repository import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """Process-local implementation of the UserRepository."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = Lock()

    @staticmethod
    def _key(username: str) -> str:
        return username.casefold()

    def exists_with_username(self, username: str) -> bool:
        return self._key(username) in self._users

    def find_by_username(self, username: str) -> Optional[User]:
        return self._users.get(self._key(username))

    def create(self, user: User) -> User:
        key = self._key(user.username)
        with self._lock:
            if key in self._users:
                raise RecordNotUniqueError("username", user.username)
            self._users[key] = user
        return user

    def __len__(self) -> int:
        return len(self._users)
