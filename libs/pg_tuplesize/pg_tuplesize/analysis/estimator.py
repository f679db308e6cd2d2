"""Tuple size estimation (header, null bitmap, column payload)"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from .config import TupleLayoutConfig
from .data import ColumnSize, Row, TupleSizeEstimate
from .errors import InvalidRowError
from .types import classify


def null_bitmap_size(column_count: int) -> int:
    """One bit per attribute, rounded up to a whole byte."""
    return (column_count + 7) // 8


def column_size(name: str, value: Any) -> ColumnSize:
    """Size a single column value by its kind."""
    kind = classify(value)
    return ColumnSize(
        name=name,
        size=kind.size_of(value),
        is_null=value is None,
        is_variable_length=kind.is_variable_length,
    )


def analyze_tuple(
    row: Union[Row, Mapping[str, Any]],
    primary_key: Optional[str] = None,
    layout: Optional[TupleLayoutConfig] = None,
) -> TupleSizeEstimate:
    """Compute the theoretical minimum size of a row, without alignment padding.

    Args:
        row: Row or mapping of column name -> value, in attribute order.
        primary_key: Column skipped when summing sizes. Defaults to the
            Row's own primary key, then to the layout's.
        layout: Tuple header constants. Default: 23 byte header, key `id`.

    Returns:
        TupleSizeEstimate with the per-column breakdown in attribute order.

    Raises:
        InvalidRowError: row is not a mapping or has no attributes.
    """
    layout = layout or TupleLayoutConfig()

    if isinstance(row, Row):
        values = row.values
        primary_key = primary_key or row.primary_key
    elif isinstance(row, Mapping):
        values = row
    else:
        raise InvalidRowError(
            f"Expected a Row or mapping, got {type(row).__name__}"
        )
    primary_key = primary_key or layout.primary_key

    # Bitmap covers every attribute, the primary key included
    column_count = len(values)
    if column_count == 0:
        raise InvalidRowError("Row has no attributes")

    columns = [
        column_size(name, value)
        for name, value in values.items()
        if name != primary_key
    ]

    return TupleSizeEstimate(
        header_size=layout.header_size,
        null_bitmap_size=null_bitmap_size(column_count),
        column_count=column_count,
        columns=columns,
    )


def estimate(
    row: Union[Row, Mapping[str, Any]],
    primary_key: Optional[str] = None,
) -> tuple[int, list[ColumnSize]]:
    """Return (total_bytes, breakdown) for a row.

    Breakdown entries are (column_name, size_bytes, is_null, is_variable_length).
    """
    result = analyze_tuple(row, primary_key=primary_key)
    return result.total_bytes, list(result.columns)
