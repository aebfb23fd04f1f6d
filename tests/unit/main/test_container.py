from __future__ import annotations

import pytest

from src.application.use_cases.sign_up_use_case import SignUpUseCase
from src.main.config import AppSettings
from src.main.container import get_container, init_container


def test_init_and_get_container() -> None:
    container = init_container(AppSettings())

    assert get_container() is container
    assert container.user_repository() is container.user_repository()
    assert container.mailer().sender == "no-reply@example.com"


def test_sign_up_provider_runs_use_case(make_form) -> None:
    container = init_container(AppSettings())

    use_case = container.sign_up_use_case(make_form())

    assert isinstance(use_case, SignUpUseCase)
    assert use_case.succeeded() is True
    assert container.user_repository().exists_with_username("ada_lovelace")
    assert [message.recipient for message in container.mailer().outbox] == [
        "ada@example.com"
    ]


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
