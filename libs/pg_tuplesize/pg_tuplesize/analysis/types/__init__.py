from .kinds import ValueKind, classify, to_json
from .stats import StorageSizes, StorageSnapshot, TableStats

__all__ = [
    "ValueKind",
    "classify",
    "to_json",
    "TableStats",
    "StorageSizes",
    "StorageSnapshot",
]
