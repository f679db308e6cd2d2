import datetime
import uuid
from collections import OrderedDict
from decimal import Decimal

import pytest

from pg_tuplesize import ValueKind, classify
from pg_tuplesize.analysis.types import to_json


@pytest.mark.parametrize(
    "value,kind",
    [
        (None, ValueKind.NULL),
        ("text", ValueKind.TEXT),
        (b"\x00\x01", ValueKind.TEXT),
        (bytearray(b"ab"), ValueKind.TEXT),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (0, ValueKind.INTEGER),
        (datetime.datetime(2024, 1, 1), ValueKind.TIMESTAMP),
        (datetime.date(2024, 1, 1), ValueKind.DATE),
        (Decimal("1.5"), ValueKind.NUMERIC),
        (1.5, ValueKind.OTHER),
        ({"a": 1}, ValueKind.STRUCTURED),
        (OrderedDict(a=1), ValueKind.STRUCTURED),
        (["a"], ValueKind.OTHER),
        (uuid.UUID(int=0), ValueKind.OTHER),
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


def test_bool_is_not_sized_as_integer():
    # bool subclasses int
    assert ValueKind.BOOLEAN.size_of(True) == 1
    assert classify(True).size_of(True) == 1


def test_datetime_is_not_sized_as_date():
    now = datetime.datetime(2024, 5, 5, 10, 30)
    assert classify(now).size_of(now) == 8


@pytest.mark.parametrize(
    "kind,size",
    [
        (ValueKind.NULL, 0),
        (ValueKind.BOOLEAN, 1),
        (ValueKind.INTEGER, 4),
        (ValueKind.DATE, 4),
        (ValueKind.TIMESTAMP, 8),
        (ValueKind.NUMERIC, 8),
        (ValueKind.TEXT, None),
        (ValueKind.STRUCTURED, None),
        (ValueKind.OTHER, None),
    ],
)
def test_fixed_sizes(kind, size):
    assert kind.fixed_size == size


def test_only_text_and_structured_are_variable_length():
    variable = {kind for kind in ValueKind if kind.is_variable_length}
    assert variable == {ValueKind.TEXT, ValueKind.STRUCTURED}


def test_text_size_is_utf8_byte_length():
    assert ValueKind.TEXT.size_of("日本") == 6
    assert ValueKind.TEXT.size_of(memoryview(b"abc")) == 3


def test_structured_size_uses_serialized_json():
    details = {"department": "HR"}
    assert to_json(details) == '{"department": "HR"}'
    assert ValueKind.STRUCTURED.size_of(details) == 20


def test_structured_with_non_json_values_does_not_raise():
    details = {"since": datetime.date(2020, 1, 1), "bonus": Decimal("10.5")}

    size = ValueKind.STRUCTURED.size_of(details)

    assert size == len('{"since": "2020-01-01", "bonus": "10.5"}')


def test_fallback_uses_string_representation():
    value = uuid.UUID(int=1)
    assert ValueKind.OTHER.size_of(value) == 36


def test_float_is_sized_by_string_representation():
    assert classify(60000.0).size_of(60000.0) == len("60000.0")


@pytest.mark.parametrize(
    "details",
    [
        {datetime.date(2024, 1, 1): "hired"},
        {("a", "b"): 1},
    ],
)
def test_structured_with_unserializable_keys_falls_back_to_string(details):
    size = ValueKind.STRUCTURED.size_of(details)

    assert size == len(str(details).encode("utf-8"))


def test_circular_structured_value_falls_back_to_string():
    details = {"name": "loop"}
    details["self"] = details

    assert ValueKind.STRUCTURED.size_of(details) == len(str(details))
