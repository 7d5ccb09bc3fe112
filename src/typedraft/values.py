"""
Scalar value model for flattened JSON leaves.

Every leaf of a parsed JSON document is captured as one of four immutable
variants. Numbers are always held as ``Decimal`` so that no precision is lost
between parsing and type inference.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union


class ValueKind(str, Enum):
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    NULL = "Null"


@dataclass(frozen=True)
class Text:
    value: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.STRING


@dataclass(frozen=True)
class Number:
    value: Decimal

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NUMBER


@dataclass(frozen=True)
class Boolean:
    value: bool

    @property
    def kind(self) -> ValueKind:
        return ValueKind.BOOLEAN


@dataclass(frozen=True)
class Null:
    @property
    def kind(self) -> ValueKind:
        return ValueKind.NULL


JsonScalar = Union[Text, Number, Boolean, Null]


def to_scalar(value: Any) -> JsonScalar:
    """
    Wrap a parsed leaf value in its scalar variant.

    The JSON reader hands back ``int`` for integral numbers and ``Decimal``
    for everything else; both end up as ``Decimal``. ``float`` is refused
    so a lossy parse cannot slip through unnoticed.
    """
    if value is None:
        return Null()
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (int, Decimal)):
        return Number(Decimal(value))
    raise TypeError(f"Unexpected JSON leaf of type {type(value).__name__}: {value!r}")
