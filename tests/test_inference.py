import itertools
from decimal import Decimal

from typedraft.flatten import Entry
from typedraft.grouping import group_entries, named_groups
from typedraft.inference import (
    ScalarType,
    SetType,
    has_mixed_kinds,
    infer_field_type,
    is_collection,
    value_kinds,
)
from typedraft.values import Boolean, Null, Number, Text, ValueKind


def entry(value, from_collection=False, path=("f",)):
    return Entry(path, value, from_collection)


def test_single_kind_maps_directly():
    assert infer_field_type([entry(Text("a"))]) == ScalarType("String")
    assert infer_field_type([entry(Number(Decimal(1)))]) == ScalarType("Number")
    assert infer_field_type([entry(Boolean(True))]) == ScalarType("Boolean")


def test_nulls_are_ignored():
    group = [entry(Null()), entry(Boolean(False)), entry(Null())]
    assert value_kinds(group) == {ValueKind.BOOLEAN}
    assert infer_field_type(group) == ScalarType("Boolean")


def test_all_null_defaults_to_string():
    assert infer_field_type([entry(Null()), entry(Null())]) == ScalarType("String")


def test_mixed_kinds_fall_back_to_string():
    group = [entry(Text("a")), entry(Number(Decimal(3)))]
    assert has_mixed_kinds(group)
    assert infer_field_type(group) == ScalarType("String")


def test_collection_of_numbers_is_a_set():
    group = [entry(Number(Decimal(n)), True) for n in range(3)]
    field_type = infer_field_type(group)
    assert field_type == SetType(ScalarType("Number"))
    assert field_type.to_dict() == {"name": "Set", "elementType": {"name": "Number"}}


def test_one_collection_entry_is_enough_for_a_set():
    group = [entry(Text("a")), entry(Text("b"), True)]
    assert is_collection(group)
    assert infer_field_type(group) == SetType(ScalarType("String"))


def test_no_collection_entries_never_wraps():
    group = [entry(Text("a")), entry(Null()), entry(Number(Decimal(1)))]
    assert not is_collection(group)
    assert isinstance(infer_field_type(group), ScalarType)


def test_inference_is_order_independent():
    group = [
        entry(Text("a")),
        entry(Null(), True),
        entry(Number(Decimal(2))),
        entry(Boolean(True)),
    ]
    results = {infer_field_type(list(p)) for p in itertools.permutations(group)}
    assert results == {SetType(ScalarType("String"))}


def test_scalar_type_to_dict():
    assert ScalarType("Boolean").to_dict() == {"name": "Boolean"}


def test_group_entries_preserves_encounter_order():
    entries = [
        Entry(("items", "0", "id"), Number(Decimal(1)), False),
        Entry(("title",), Text("x"), False),
        Entry(("items", "1", "id"), Number(Decimal(2)), False),
        Entry((), Text("bare"), False),
    ]
    groups = group_entries(entries)
    assert list(groups) == [("items", "id"), ("title",), ()]
    assert groups[("items", "id")] == [entries[0], entries[2]]
    assert list(named_groups(groups)) == [("items", "id"), ("title",)]
