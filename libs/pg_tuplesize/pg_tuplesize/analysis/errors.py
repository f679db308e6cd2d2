"""Exceptions raised by the estimator and the statistics engine."""


class TupleSizeError(Exception):
    """Base class for pg_tuplesize errors."""


class InvalidRowError(TupleSizeError, ValueError):
    """Row has no attributes or is not a mapping."""


class NotFoundError(TupleSizeError, LookupError):
    """Table has no catalog or statistics row."""

    def __init__(self, table_name: str, schema_name: str = "public", what: str = "statistics"):
        self.table_name = table_name
        self.schema_name = schema_name
        super().__init__(f"No {what} recorded for table '{schema_name}.{table_name}'")


class StorageBackendError(TupleSizeError):
    """Query or connectivity failure reported by the database driver."""
