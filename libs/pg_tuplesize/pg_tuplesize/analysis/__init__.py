"""Tuple size analysis package."""

from .engine import AsyncTupleStatsEngine
from .estimator import analyze_tuple, column_size, estimate, null_bitmap_size
from .config import (
    DatabaseSettings,
    TableConfig,
    TupleLayoutConfig,
)
from .data import ColumnSize, Row, TupleSizeEstimate
from .errors import (
    InvalidRowError,
    NotFoundError,
    StorageBackendError,
    TupleSizeError,
)
from .types import (
    StorageSizes,
    StorageSnapshot,
    TableStats,
    ValueKind,
    classify,
)

__all__ = [
    # Main classes
    "AsyncTupleStatsEngine",
    # Estimation
    "estimate",
    "analyze_tuple",
    "column_size",
    "null_bitmap_size",
    # Configs
    "DatabaseSettings",
    "TableConfig",
    "TupleLayoutConfig",
    # Data
    "Row",
    "ColumnSize",
    "TupleSizeEstimate",
    # Errors
    "TupleSizeError",
    "InvalidRowError",
    "NotFoundError",
    "StorageBackendError",
    # Types
    "ValueKind",
    "classify",
    "TableStats",
    "StorageSizes",
    "StorageSnapshot",
]
