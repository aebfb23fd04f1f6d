from __future__ import annotations

from datetime import date
from typing import List

import pytest

from src.application.models.attributes import Attribute, AttributeModel, attribute
from src.domain.entities.errors import UnknownAttributeError, UsageError


class _Widget:
    pass


class _Profile(AttributeModel):
    name = attribute(str)
    age = attribute(int)
    newsletter = attribute(bool, default=False)
    born_on = attribute(date)
    tags = attribute(List[str], default=[])
    widget = attribute(_Widget)


class _AdminProfile(_Profile):
    level = attribute(int, default="3")


def test_values_are_coerced_to_declared_types() -> None:
    profile = _Profile(age="42", newsletter="yes", born_on="1815-12-10")

    assert profile.age == 42
    assert profile.newsletter is True
    assert profile.born_on == date(1815, 12, 10)


def test_uncoercible_values_become_none() -> None:
    profile = _Profile(name=12, age="forty-two", born_on="yesterday", tags="a")

    assert profile.name is None
    assert profile.age is None
    assert profile.born_on is None
    assert profile.tags is None


def test_plain_class_attributes_accept_instances_only() -> None:
    widget = _Widget()

    assert _Profile(widget=widget).widget is widget
    assert _Profile(widget="not a widget").widget is None


def test_assignment_after_construction_coerces() -> None:
    profile = _Profile()

    profile.age = "7"
    assert profile.age == 7

    profile.age = object()
    assert profile.age is None


def test_defaults_are_coerced_and_not_shared() -> None:
    first = _AdminProfile()
    second = _AdminProfile()

    first.tags.append("x")

    assert first.level == 3
    assert second.tags == []
    assert first.newsletter is False
    assert first.name is None


def test_unknown_attribute_raises_usage_error() -> None:
    with pytest.raises(UnknownAttributeError) as exc:
        _Profile(nickname="ada")

    assert isinstance(exc.value, UsageError)
    assert exc.value.name == "nickname"


def test_declared_attributes_include_inherited_in_order() -> None:
    declared = _AdminProfile.declared_attributes()

    assert list(declared) == [
        "name",
        "age",
        "newsletter",
        "born_on",
        "tags",
        "widget",
        "level",
    ]
    assert isinstance(_Profile.age, Attribute)


def test_attributes_returns_current_values() -> None:
    profile = _Profile(name="Ada", age=36)

    assert profile.attributes() == {
        "name": "Ada",
        "age": 36,
        "newsletter": False,
        "born_on": None,
        "tags": [],
        "widget": None,
    }
