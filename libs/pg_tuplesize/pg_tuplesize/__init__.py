"""PostgreSQL tuple size estimation and storage statistics."""

from .analysis import (
    # Main classes
    AsyncTupleStatsEngine,
    # Estimation
    estimate,
    analyze_tuple,
    column_size,
    null_bitmap_size,
    # Configs
    DatabaseSettings,
    TableConfig,
    TupleLayoutConfig,
    # Data
    Row,
    ColumnSize,
    TupleSizeEstimate,
    # Errors
    TupleSizeError,
    InvalidRowError,
    NotFoundError,
    StorageBackendError,
    # Types
    ValueKind,
    classify,
    TableStats,
    StorageSizes,
    StorageSnapshot,
)

__version__ = "0.1.0"

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
