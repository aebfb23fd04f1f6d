from __future__ import annotations

from src.application.models import (
    AttributeModel,
    Validatable,
    acceptance,
    attribute,
    confirmation_of,
    inclusion,
    length,
    matches,
    number_range,
    presence,
    validates,
    validation,
)


class _Account(AttributeModel, Validatable):
    handle = attribute(str)
    plan = attribute(str, default="free")
    seats = attribute(int)
    secret = attribute(str)
    secret_again = attribute(str)
    agreed = attribute(bool)

    validations = (
        validates("handle", presence(), length(minimum=2, maximum=5)),
        validates("plan", inclusion(["free", "pro"])),
        validates("seats", number_range(minimum=1, maximum=10)),
        validates("secret_again", confirmation_of("secret")),
        validates("agreed", acceptance()),
    )

    @validation
    def handle_is_not_reserved(self) -> None:
        if self.handle == "root":
            self.errors.add("handle", "is reserved")


class _TeamAccount(_Account):
    team = attribute(str)

    validations = (validates("team", presence()),)


def _valid_account(**overrides) -> _Account:
    data = {"handle": "ada", "seats": 2, "agreed": True}
    data.update(overrides)
    return _Account(**data)


def test_valid_account_has_no_errors() -> None:
    account = _valid_account()

    assert account.valid() is True
    assert account.invalid() is False
    assert not account.errors


def test_each_rule_reports_its_message() -> None:
    account = _Account(
        handle="abcdefg",
        plan="gold",
        seats=0,
        secret="one",
        secret_again="two",
        agreed=False,
    )

    assert account.valid() is False
    assert account.errors.to_dict() == {
        "handle": ["is too long (maximum is 5 characters)"],
        "plan": ["is not included in the list"],
        "seats": ["must be greater than or equal to 1"],
        "secret_again": ["doesn't match Secret"],
        "agreed": ["must be accepted"],
    }


def test_missing_values_are_reported_once() -> None:
    account = _valid_account(handle=None, seats=None)

    assert account.valid() is False
    assert account.errors.to_dict() == {"handle": ["can't be blank"]}


def test_method_rules_run_after_field_rules() -> None:
    account = _valid_account(handle="root")

    assert account.valid() is False
    assert account.errors["handle"] == ["is reserved"]


def test_valid_clears_previous_errors() -> None:
    account = _valid_account(handle="")
    assert account.valid() is False

    account.handle = "ada"

    assert account.valid() is True
    assert not account.errors


def test_subclass_rules_extend_inherited_rules() -> None:
    account = _TeamAccount(handle="x", seats=2, agreed=True)

    assert account.valid() is False
    assert account.errors.fields() == ["handle", "team"]


class _StrictAccount(_Account):
    @validation
    def handle_is_not_reserved(self) -> None:
        if self.handle in ("root", "admin"):
            self.errors.add("handle", "is reserved for staff")


class _OpenAccount(_Account):
    def handle_is_not_reserved(self) -> None:
        pass


def test_overridden_method_rule_replaces_inherited_rule() -> None:
    account = _StrictAccount(handle="root", seats=2, agreed=True)

    assert account.valid() is False
    assert account.errors["handle"] == ["is reserved for staff"]


def test_undecorated_override_drops_inherited_rule() -> None:
    account = _OpenAccount(handle="root", seats=2, agreed=True)

    assert account.valid() is True


def test_matches_uses_full_match() -> None:
    check = matches(r"[a-z]+", "must be lowercase")

    assert check("abc", None) is None
    assert check("abc1", None) == "must be lowercase"
    assert check(None, None) is None
