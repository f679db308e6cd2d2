"""Storage statistics definitions"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TableStats(BaseModel):
    """Row activity counters from pg_stat_user_tables."""
    model_config = ConfigDict(frozen=True)

    live_tuples: int = Field(..., ge=0, description="Estimated live rows (n_live_tup)")
    dead_tuples: int = Field(..., ge=0, description="Obsolete row versions pending vacuum (n_dead_tup)")
    inserts: int = Field(..., ge=0, description="Rows inserted (n_tup_ins)")
    updates: int = Field(..., ge=0, description="Rows updated (n_tup_upd)")
    deletes: int = Field(..., ge=0, description="Rows deleted (n_tup_del)")


class StorageSizes(BaseModel):
    """Human-readable sizes as rendered by pg_size_pretty."""
    model_config = ConfigDict(frozen=True)

    total_size: str = Field(..., description="Table, indexes and TOAST together")
    table_size: str = Field(..., description="Main heap fork")
    index_size: str = Field(..., description="All indexes on the table")
    toast_size: Optional[str] = Field(None, description="TOAST relation, None if the table has none")


class StorageSnapshot(BaseModel):
    """Counters and sizes of one table, read in two separate queries."""
    model_config = ConfigDict(frozen=True)

    table_name: str
    schema_name: str = "public"
    stats: TableStats
    sizes: StorageSizes
