from __future__ import annotations

import pytest

from src.application.forms.sign_up_form import SignUpForm


def test_valid_form(make_form) -> None:
    form = make_form()

    assert form.valid() is True
    assert form.normalized_email == "ada@example.com"


def test_blank_form_reports_every_required_field() -> None:
    form = SignUpForm()

    assert form.valid() is False
    assert form.errors.to_dict() == {
        "username": ["can't be blank"],
        "email": ["can't be blank"],
        "password": ["can't be blank"],
        "accept_terms": ["must be accepted"],
    }


@pytest.mark.parametrize(
    ("overrides", "field", "message"),
    [
        ({"username": "ab"}, "username", "is too short (minimum is 3 characters)"),
        (
            {"username": "Ada Lovelace"},
            "username",
            "may only contain lowercase letters, digits and underscores",
        ),
        ({"email": "ada.example.com"}, "email", "is not a valid e-mail address"),
        (
            {"password": "short", "password_confirmation": "short"},
            "password",
            "is too short (minimum is 8 characters)",
        ),
        (
            {"password_confirmation": "something-else"},
            "password_confirmation",
            "doesn't match Password",
        ),
        ({"accept_terms": "no"}, "accept_terms", "must be accepted"),
    ],
)
def test_invalid_fields(make_form, overrides, field, message) -> None:
    form = make_form(**overrides)

    assert form.valid() is False
    assert form.errors[field] == [message]


def test_uncoercible_input_is_treated_as_missing(make_form) -> None:
    form = make_form(email=["ada@example.com"], accept_terms="maybe")

    assert form.email is None
    assert form.accept_terms is None
    assert form.valid() is False
    assert form.errors["email"] == ["can't be blank"]
    assert form.errors["accept_terms"] == ["must be accepted"]
