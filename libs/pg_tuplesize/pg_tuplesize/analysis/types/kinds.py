"""Type definitions"""

import datetime
import decimal
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any


# Column Value Kind
class ValueKind(Enum):
    """Storage size class of a column value"""

    NULL = "null"
    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    TIMESTAMP = "timestamp"
    DATE = "date"
    NUMERIC = "numeric"
    STRUCTURED = "structured"
    OTHER = "other"  # Fallback, sized by string representation

    @property
    def is_variable_length(self) -> bool:
        """Return whether values of this kind have no fixed slot."""
        return self in (ValueKind.TEXT, ValueKind.STRUCTURED)

    @property
    def fixed_size(self) -> int | None:
        """Return the slot width in bytes, None for variable-sized kinds."""
        if self == ValueKind.NULL:
            return 0
        elif self == ValueKind.BOOLEAN:
            return 1
        elif self == ValueKind.INTEGER:
            return 4
        elif self == ValueKind.DATE:
            return 4
        elif self == ValueKind.TIMESTAMP:
            return 8
        elif self == ValueKind.NUMERIC:
            return 8
        return None

    def size_of(self, value: Any) -> int:
        """Return the encoded size in bytes of a value of this kind."""
        fixed = self.fixed_size
        if fixed is not None:
            return fixed
        if self == ValueKind.TEXT:
            if isinstance(value, str):
                return len(value.encode("utf-8"))
            return len(bytes(value))
        elif self == ValueKind.STRUCTURED:
            try:
                return len(to_json(value).encode("utf-8"))
            except (TypeError, ValueError):
                # Unserializable keys or circular references
                return len(str(value).encode("utf-8"))
        elif self == ValueKind.OTHER:
            return len(str(value).encode("utf-8"))
        raise ValueError(f"Unknown value kind: {self}")


def to_json(value: Mapping) -> str:
    """Serialize a structured value the way it is sized."""
    return json.dumps(dict(value), ensure_ascii=False, default=str)


def classify(value: Any) -> ValueKind:
    """Map a runtime value to its size class.

    bool is checked before int and datetime before date since each
    subclasses the other.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return ValueKind.TEXT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, datetime.datetime):
        return ValueKind.TIMESTAMP
    if isinstance(value, datetime.date):
        return ValueKind.DATE
    if isinstance(value, decimal.Decimal):
        return ValueKind.NUMERIC
    if isinstance(value, Mapping):
        return ValueKind.STRUCTURED
    return ValueKind.OTHER
