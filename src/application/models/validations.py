"""
Declarative validation rules.

A :class:`Validatable` class lists field rules in its ``validations`` class
attribute and may add method rules with the :func:`validation` decorator.
``valid()`` clears the error collection and runs every rule in declaration
order: field rules first, base classes before subclasses,
then method rules. A subclass method overriding a rule replaces it.

Field validators are callables ``(value, model) -> Optional[str]`` that
return a message when the value is unacceptable. Apart from ``presence``
and ``acceptance`` they ignore ``None`` so a missing value is reported
once.
"""

import re
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterable,
    List,
    Optional,
    Pattern,
    Sequence,
    Union,
)

from .errors import ErrorCollection

FieldValidator = Callable[[Any, Any], Optional[str]]
Rule = Callable[[Any], None]


class FieldRule:
    """Runs a sequence of validators against one attribute."""

    def __init__(self, field: str, validators: Sequence[FieldValidator]):
        self.field = field
        self.validators = list(validators)

    def __call__(self, model: Any) -> None:
        value = getattr(model, self.field)
        for validator in self.validators:
            message = validator(value, model)
            if message:
                model.errors.add(self.field, message)


def validates(field: str, *validators: FieldValidator) -> FieldRule:
    """Declare the validators that apply to ``field``."""
    return FieldRule(field, validators)


def validation(method: Callable[[Any], None]) -> Callable[[Any], None]:
    """Mark a method as a validation rule; it adds to ``self.errors`` itself."""
    method.__is_validation__ = True  # type: ignore[attr-defined]
    return method


class Validatable:
    """Mixin providing an error collection and rule evaluation."""

    validations: ClassVar[Sequence[FieldRule]] = ()
    _rules: ClassVar[List[Rule]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        field_rules: List[Rule] = []
        method_rules: Dict[str, Rule] = {}
        for klass in reversed(cls.__mro__):
            field_rules.extend(vars(klass).get("validations", ()))
            for name, value in vars(klass).items():
                if getattr(value, "__is_validation__", False):
                    method_rules[name] = value
                else:
                    method_rules.pop(name, None)
        cls._rules = field_rules + list(method_rules.values())

    def __init__(self) -> None:
        super().__init__()
        self._errors = ErrorCollection()

    @property
    def errors(self) -> ErrorCollection:
        return self._errors

    def valid(self) -> bool:
        """Clear previous messages, run every rule and report the result."""
        self._errors.clear()
        for rule in self._rules:
            rule(self)
        return not self._errors

    def invalid(self) -> bool:
        return not self.valid()

    def merge_errors(self, other: Any) -> None:
        """Append the messages of another error-bearing object to ours."""
        self._errors.merge(other)


def presence(message: str = "can't be blank") -> FieldValidator:
    def check(value: Any, model: Any) -> Optional[str]:
        if value is None:
            return message
        if isinstance(value, str) and not value.strip():
            return message
        if isinstance(value, (list, tuple, dict, set)) and not value:
            return message
        return None

    return check


def length(
    minimum: Optional[int] = None, maximum: Optional[int] = None
) -> FieldValidator:
    def check(value: Any, model: Any) -> Optional[str]:
        if value is None:
            return None
        if minimum is not None and len(value) < minimum:
            return f"is too short (minimum is {minimum} characters)"
        if maximum is not None and len(value) > maximum:
            return f"is too long (maximum is {maximum} characters)"
        return None

    return check


def matches(
    pattern: Union[str, Pattern[str]], message: str = "is invalid"
) -> FieldValidator:
    compiled = re.compile(pattern)

    def check(value: Any, model: Any) -> Optional[str]:
        if value is None:
            return None
        if not compiled.fullmatch(str(value)):
            return message
        return None

    return check


def inclusion(
    choices: Iterable[Any], message: str = "is not included in the list"
) -> FieldValidator:
    allowed = tuple(choices)

    def check(value: Any, model: Any) -> Optional[str]:
        if value is None or value in allowed:
            return None
        return message

    return check


def number_range(
    minimum: Optional[float] = None, maximum: Optional[float] = None
) -> FieldValidator:
    def check(value: Any, model: Any) -> Optional[str]:
        if value is None:
            return None
        if minimum is not None and value < minimum:
            return f"must be greater than or equal to {minimum}"
        if maximum is not None and value > maximum:
            return f"must be less than or equal to {maximum}"
        return None

    return check


def confirmation_of(field: str) -> FieldValidator:
    """The value must equal the attribute ``field`` of the same model."""
    label = field.replace("_", " ").capitalize()

    def check(value: Any, model: Any) -> Optional[str]:
        if value is None:
            return None
        if value != getattr(model, field):
            return f"doesn't match {label}"
        return None

    return check


def acceptance(message: str = "must be accepted") -> FieldValidator:
    def check(value: Any, model: Any) -> Optional[str]:
        return None if value is True else message

    return check
