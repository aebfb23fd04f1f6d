"""Attribute, error and validation building blocks for use cases and forms."""

from .attributes import Attribute, AttributeModel, attribute
from .errors import BASE, ErrorCollection
from .validations import (
    FieldRule,
    Validatable,
    acceptance,
    confirmation_of,
    inclusion,
    length,
    matches,
    number_range,
    presence,
    validates,
    validation,
)

__all__ = [
    "Attribute",
    "AttributeModel",
    "attribute",
    "BASE",
    "ErrorCollection",
    "FieldRule",
    "Validatable",
    "validates",
    "validation",
    "presence",
    "length",
    "matches",
    "inclusion",
    "number_range",
    "confirmation_of",
    "acceptance",
]
