import logging
from typing import Any, Optional

from sqlalchemy import RowMapping, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .config import DatabaseSettings, TableConfig
from .errors import NotFoundError, StorageBackendError
from .types import StorageSizes, StorageSnapshot, TableStats

logger = logging.getLogger(__name__)

TABLE_STATS_QUERY = """
    SELECT
        n_live_tup AS live_tuples,
        n_dead_tup AS dead_tuples,
        n_tup_ins AS inserts,
        n_tup_upd AS updates,
        n_tup_del AS deletes
    FROM pg_stat_user_tables
    WHERE relname = :table_name
      AND schemaname = :schema_name
"""

STORAGE_SIZES_QUERY = """
    SELECT
        pg_size_pretty(pg_total_relation_size(c.oid)) AS total_size,
        pg_size_pretty(pg_relation_size(c.oid)) AS table_size,
        pg_size_pretty(pg_indexes_size(c.oid)) AS index_size,
        CASE WHEN c.reltoastrelid <> 0
             THEN pg_size_pretty(pg_total_relation_size(c.reltoastrelid))
        END AS toast_size
    FROM pg_class c
    JOIN pg_namespace n ON n.oid = c.relnamespace
    WHERE c.relname = :table_name
      AND n.nspname = :schema_name
"""


class AsyncTupleStatsEngine:
    """Reads row activity counters and storage sizes of a table.

    Every query checks out its own connection from the pool, so two calls
    are never atomic with respect to each other.
    """

    __create_key = object()

    def __init__(
        self,
        key: object,
        pool: AsyncEngine,
    ):
        """AsyncTupleStatsEngine constructor.

        Args:
            key (object): Prevent direct constructor usage.
            pool (AsyncEngine): Async engine connection pool.
        """
        if key != AsyncTupleStatsEngine.__create_key:
            raise Exception(
                "Only create class through 'from_connection_string', 'from_settings' or 'from_engine' methods!"
            )
        self._pool = pool

    @classmethod
    def from_engine(
        cls: type["AsyncTupleStatsEngine"],
        engine: AsyncEngine
    ) -> "AsyncTupleStatsEngine":
        """Create an AsyncTupleStatsEngine instance from an AsyncEngine."""
        return cls(cls.__create_key, engine)

    @classmethod
    def from_connection_string(
        cls,
        url: str | URL,
        **kwargs: Any,
    ) -> "AsyncTupleStatsEngine":
        engine = create_async_engine(url, **kwargs)
        return cls(cls.__create_key, engine)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[DatabaseSettings] = None,
        **kwargs: Any,
    ) -> "AsyncTupleStatsEngine":
        settings = settings or DatabaseSettings()
        return cls.from_connection_string(settings.url, **kwargs)

    async def close(self) -> None:
        """Dispose of connection pool"""
        await self._pool.dispose()

    async def _fetch_one(
        self,
        query: str,
        params: dict[str, Any],
    ) -> Optional[RowMapping]:
        logger.debug(f"Executing statistics query with {params}")
        try:
            async with self._pool.connect() as conn:
                result = await conn.execute(text(query), params)
                return result.mappings().first()
        except SQLAlchemyError as e:
            logger.error(f"Statistics query failed for {params}: {e}")
            raise StorageBackendError(str(e)) from e

    # ==========================================
    # Statistics
    # ==========================================

    async def table_stats(
        self,
        table_name: str,
        schema_name: str = "public",
    ) -> TableStats:
        """Row activity counters from pg_stat_user_tables.

        Counters are the collector's current bookkeeping and may lag behind
        recent writes until the table is analyzed.

        Raises:
            NotFoundError: the table has no statistics row.
            StorageBackendError: the query failed.
        """
        tc = TableConfig(table_name=table_name, schema_name=schema_name)
        row = await self._fetch_one(
            TABLE_STATS_QUERY,
            {"table_name": tc.table_name, "schema_name": tc.schema_name},
        )
        if row is None:
            logger.warning(f"No statistics row for {tc.qualified_name}")
            raise NotFoundError(tc.table_name, tc.schema_name)
        return TableStats(**row)

    async def storage_sizes(
        self,
        table_name: str,
        schema_name: str = "public",
    ) -> StorageSizes:
        """Total, heap, index and TOAST sizes rendered by pg_size_pretty.

        toast_size is None when the table has no TOAST relation.

        Raises:
            NotFoundError: the table does not exist.
            StorageBackendError: the query failed.
        """
        tc = TableConfig(table_name=table_name, schema_name=schema_name)
        row = await self._fetch_one(
            STORAGE_SIZES_QUERY,
            {"table_name": tc.table_name, "schema_name": tc.schema_name},
        )
        if row is None:
            logger.warning(f"No catalog entry for {tc.qualified_name}")
            raise NotFoundError(tc.table_name, tc.schema_name, what="relation")
        return StorageSizes(**row)

    async def snapshot(
        self,
        table_name: str,
        schema_name: str = "public",
    ) -> StorageSnapshot:
        """Read counters then sizes. Not atomic between the two reads."""
        stats = await self.table_stats(table_name, schema_name)
        sizes = await self.storage_sizes(table_name, schema_name)
        return StorageSnapshot(
            table_name=table_name,
            schema_name=schema_name,
            stats=stats,
            sizes=sizes,
        )

    # ==========================================
    # Maintenance
    # ==========================================

    async def analyze_table(
        self,
        table_name: str,
        schema_name: str = "public",
        vacuum: bool = True,
    ) -> None:
        """Refresh planner and collector statistics for a table.

        VACUUM cannot run inside a transaction block, so the statement is
        issued on an AUTOCOMMIT connection.
        """
        tc = TableConfig(table_name=table_name, schema_name=schema_name)
        command = "VACUUM ANALYZE" if vacuum else "ANALYZE"
        logger.debug(f"Running {command} on {tc.qualified_name}")
        try:
            async with self._pool.connect() as conn:
                conn = await conn.execution_options(isolation_level="AUTOCOMMIT")
                await conn.execute(text(f"{command} {tc.qualified_name}"))
        except SQLAlchemyError as e:
            logger.error(f"{command} failed for {tc.qualified_name}: {e}")
            raise StorageBackendError(str(e)) from e
