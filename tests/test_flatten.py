from decimal import Decimal

import pytest

from typedraft.flatten import Entry, flatten_json, is_numeric_segment, normalize_path
from typedraft.values import Boolean, Null, Number, Text, ValueKind, to_scalar


def test_products_example_entries():
    doc = {"products": [{"id": 1}, {"id": 2}], "title": "Shoes"}
    entries = list(flatten_json(doc))
    assert entries == [
        Entry(("products", "id"), Number(Decimal(1)), True),
        Entry(("products", "id"), Number(Decimal(2)), True),
        Entry(("title",), Text("Shoes"), False),
    ]


def test_object_key_order_is_preserved():
    doc = {"z": 1, "a": 2, "m": {"y": True, "b": None}}
    paths = [e.path for e in flatten_json(doc)]
    assert paths == [("z",), ("a",), ("m", "y"), ("m", "b")]


def test_collection_flag_sticks_below_arrays():
    doc = {"outer": [{"inner": {"deep": "x"}}], "plain": {"deep": "y"}}
    flags = {e.path: e.from_collection for e in flatten_json(doc)}
    assert flags == {("outer", "inner", "deep"): True, ("plain", "deep"): False}


def test_nested_arrays_add_no_segments():
    entries = list(flatten_json({"grid": [[1, 2], [3]]}))
    assert [e.path for e in entries] == [("grid",)] * 3
    assert all(e.from_collection for e in entries)


def test_empty_containers_yield_nothing():
    assert list(flatten_json({"tags": []})) == []
    assert list(flatten_json({"meta": {}})) == []
    assert list(flatten_json([])) == []


def test_scalar_root_has_empty_path():
    assert list(flatten_json("hello")) == [Entry((), Text("hello"), False)]
    assert list(flatten_json(None)) == [Entry((), Null(), False)]


def test_array_root_marks_entries_as_collection():
    entries = list(flatten_json([{"a": 1}, {"a": False}]))
    assert entries == [
        Entry(("a",), Number(Decimal(1)), True),
        Entry(("a",), Boolean(False), True),
    ]


def test_numeric_object_keys_are_kept_in_raw_path():
    entries = list(flatten_json({"sizes": {"42": "L"}}))
    assert entries[0].path == ("sizes", "42")


def test_flatten_is_lazy():
    gen = flatten_json({"a": 1, "b": 2})
    assert next(gen).path == ("a",)


def test_to_scalar_variants():
    assert to_scalar(None).kind is ValueKind.NULL
    assert to_scalar(True) == Boolean(True)
    assert to_scalar(0) == Number(Decimal(0))
    assert to_scalar("0") == Text("0")


def test_to_scalar_keeps_decimal_precision():
    value = Decimal("12345678901234567890.123456789")
    scalar = to_scalar(value)
    assert isinstance(scalar.value, Decimal)
    assert str(scalar.value) == "12345678901234567890.123456789"


def test_to_scalar_rejects_floats():
    with pytest.raises(TypeError):
        to_scalar(1.5)


def test_is_numeric_segment():
    assert is_numeric_segment("0")
    assert is_numeric_segment("2024")
    assert not is_numeric_segment("")
    assert not is_numeric_segment("v2")
    assert not is_numeric_segment("-1")
    assert not is_numeric_segment("1.5")
    assert not is_numeric_segment("²")


def test_normalize_path_drops_numeric_segments():
    assert normalize_path(("sizes", "42", "label")) == ("sizes", "label")
    assert normalize_path(("1", "2")) == ()
    assert normalize_path(()) == ()


def test_normalize_path_is_idempotent():
    for path in [("a", "0", "b"), ("10",), ("x", "y"), ()]:
        once = normalize_path(path)
        assert normalize_path(once) == once


def test_unicode_decimal_digits_are_numeric():
    assert is_numeric_segment("٤٢")
    assert is_numeric_segment("४")
    assert not is_numeric_segment("½")
    assert normalize_path(("sizes", "٤٢", "label")) == ("sizes", "label")
