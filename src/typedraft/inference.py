"""
Field type inference for groups of entries sharing a normalized path.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Set, Union

from .flatten import Entry
from .values import ValueKind

STRING = "String"
NUMBER = "Number"
BOOLEAN = "Boolean"
SET = "Set"

_KIND_TO_TYPE_NAME = {
    ValueKind.STRING: STRING,
    ValueKind.NUMBER: NUMBER,
    ValueKind.BOOLEAN: BOOLEAN,
}


@dataclass(frozen=True)
class ScalarType:
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class SetType:
    element_type: ScalarType

    @property
    def name(self) -> str:
        return SET

    def to_dict(self) -> Dict[str, Any]:
        return {"name": SET, "elementType": self.element_type.to_dict()}


FieldType = Union[ScalarType, SetType]


def value_kinds(entries: Iterable[Entry]) -> Set[ValueKind]:
    """Distinct value kinds in ``entries``, nulls excluded."""
    return {entry.value.kind for entry in entries} - {ValueKind.NULL}


def has_mixed_kinds(entries: Iterable[Entry]) -> bool:
    return len(value_kinds(entries)) > 1


def is_collection(entries: Iterable[Entry]) -> bool:
    return any(entry.from_collection for entry in entries)


def base_type(kinds: Set[ValueKind]) -> ScalarType:
    """
    Resolve a set of non-null kinds to one scalar type.

    A single kind maps directly. An all-null group and a group mixing
    several kinds both fall back to String.
    """
    if len(kinds) == 1:
        (kind,) = kinds
        return ScalarType(_KIND_TO_TYPE_NAME.get(kind, STRING))
    return ScalarType(STRING)


def infer_field_type(entries: Iterable[Entry]) -> FieldType:
    """
    Infer the field type of one group.

    Only the set of kinds and the collection flag are inspected, so the
    result does not depend on entry order.
    """
    entries = list(entries)
    base = base_type(value_kinds(entries))
    if is_collection(entries):
        return SetType(element_type=base)
    return base
