from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.application.forms.sign_up_form import SignUpForm  # noqa: E402
from src.domain.entities.user import User  # noqa: E402
from src.domain.ports.mailer import IMailer  # noqa: E402
from src.infrastructure.repositories.in_memory_user_repository import (  # noqa: E402
    InMemoryUserRepository,
)


class RecordingMailer(IMailer):
    def __init__(self) -> None:
        self.delivered: List[User] = []

    def deliver_welcome(self, user: User) -> None:
        self.delivered.append(user)


@pytest.fixture()
def valid_sign_up_data() -> Dict[str, Any]:
    return {
        "username": "ada_lovelace",
        "email": "Ada@Example.com",
        "password": "analytical-engine",
        "password_confirmation": "analytical-engine",
        "accept_terms": True,
    }


@pytest.fixture()
def make_form(valid_sign_up_data: Dict[str, Any]) -> Callable[..., SignUpForm]:
    def factory(**overrides: Any) -> SignUpForm:
        return SignUpForm(**{**valid_sign_up_data, **overrides})

    return factory


@pytest.fixture()
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture()
def sample_user() -> User:
    return User(
        username="grace",
        email="grace@example.com",
        password_digest="pbkdf2_sha256$1$00$00",
    )
