"""
Typed attributes with coerce-or-nil assignment.

Classes declare fields with :func:`attribute`; every assignment runs the raw
value through a pydantic ``TypeAdapter`` in lax mode. Input that cannot be
coerced to the declared type is stored as ``None`` instead of raising, so
application code only ever sees values of the declared type or ``None``.
"""

from copy import deepcopy
from typing import Any, ClassVar, Dict, Mapping, Optional

from pydantic import ConfigDict, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from src.domain.entities.errors import UnknownAttributeError


def _build_adapter(type_: Any) -> TypeAdapter:
    try:
        return TypeAdapter(type_)
    except PydanticSchemaGenerationError:
        # Plain classes (forms, services) are checked with isinstance.
        return TypeAdapter(type_, config=ConfigDict(arbitrary_types_allowed=True))


class Attribute:
    """Descriptor for a declared, typed attribute."""

    def __init__(self, type_: Any, default: Any = None):
        self.type_ = type_
        self.default = default
        self.name: Optional[str] = None
        self._adapter = _build_adapter(type_)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        type_name = getattr(self.type_, "__name__", repr(self.type_))
        return f"attribute({self.name}: {type_name})"

    def coerce(self, raw: Any) -> Any:
        """Return ``raw`` converted to the declared type, or None."""
        if raw is None:
            return None
        try:
            return self._adapter.validate_python(raw)
        except (ValidationError, TypeError, ValueError):
            return None

    def initial_value(self) -> Any:
        return self.coerce(deepcopy(self.default))

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        if self.name not in instance.__dict__:
            instance.__dict__[self.name] = self.initial_value()
        return instance.__dict__[self.name]

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.name] = self.coerce(value)


def attribute(type_: Any, default: Any = None) -> Any:
    """
    Declare a typed attribute on an :class:`AttributeModel` subclass.

    Args:
        type_: Target type; anything pydantic can validate, or a plain class
        default: Value used until the attribute is assigned (also coerced)
    """
    return Attribute(type_, default)


class AttributeModel:
    """Base for objects built from raw, untyped input."""

    _declared_attributes: ClassVar[Dict[str, Attribute]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared: Dict[str, Attribute] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Attribute):
                    declared[name] = value
        cls._declared_attributes = declared

    def __init__(self, **raw: Any):
        super().__init__()
        self.assign_attributes(raw)

    @classmethod
    def declared_attributes(cls) -> Dict[str, Attribute]:
        return dict(cls._declared_attributes)

    def assign_attributes(self, raw: Mapping[str, Any]) -> None:
        """
        Assign every entry of ``raw`` through its attribute's coercion.

        Raises:
            UnknownAttributeError: If a key was never declared
        """
        for name, value in raw.items():
            if name not in self._declared_attributes:
                raise UnknownAttributeError(type(self).__name__, name)
            setattr(self, name, value)

    def attributes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self._declared_attributes}
