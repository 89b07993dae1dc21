"""psycopg implementation of the QueryExecutor protocol.

The proxy's admin console only understands the simple query protocol and
rejects transactions, so connections run in autocommit mode and queries are
sent without parameters (psycopg then skips Parse/Bind).
"""

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

import psycopg
from psycopg_pool import AsyncConnectionPool

from odyssey_stats.core.exceptions import RowDecodeError, SchemaDiscoveryError
from odyssey_stats.core.logging import logger

# psycopg_pool has no "unlimited" lifetime; ten years is close enough.
_UNLIMITED_LIFETIME = 10 * 365 * 24 * 3600.0


class PsycopgResultCursor:
    """ResultCursor over an executed ``psycopg.AsyncCursor``."""

    def __init__(self, cursor: psycopg.AsyncCursor[Any]) -> None:
        self._cursor = cursor
        self._row: Sequence[Any] | None = None
        self._err: BaseException | None = None

    def columns(self) -> list[str]:
        description = self._cursor.description
        if description is None:
            raise SchemaDiscoveryError("query did not return a result set")
        return [column.name for column in description]

    async def next(self) -> bool:
        if self._err is not None:
            return False
        try:
            self._row = await self._cursor.fetchone()
        except psycopg.Error as exc:
            self._row = None
            self._err = exc
            return False
        return self._row is not None

    def scan(self) -> Sequence[Any]:
        if self._row is None:
            raise RowDecodeError("scan called without a current row")
        return self._row

    def err(self) -> BaseException | None:
        return self._err


class PsycopgQueryExecutor:
    """Execute console queries over a small psycopg connection pool.

    Args:
        conninfo: libpq keyword string or URL of the proxy console.
        max_idle: Connections kept open between cycles.
        max_open: Maximum connections; ``max_idle`` is clamped to it.
        max_lifetime: Seconds before a connection is recycled, 0 for never.
        timeout: Seconds to wait for a free connection.
    """

    def __init__(
        self,
        conninfo: str,
        *,
        max_idle: int = 1,
        max_open: int = 1,
        max_lifetime: float = 0.0,
        timeout: float = 5.0,
    ) -> None:
        self._pool = AsyncConnectionPool(
            conninfo,
            min_size=min(max_idle, max_open),
            max_size=max_open,
            max_lifetime=max_lifetime or _UNLIMITED_LIFETIME,
            timeout=timeout,
            kwargs={"autocommit": True, "prepare_threshold": None},
            open=False,
        )
        self._logger = logger.with_context(context_base="driver", operation="pool")

    async def open(self) -> None:
        """Open the pool; connections are established in the background."""
        await self._pool.open(wait=False)
        self._logger.info(
            "Connection pool opened (min=%d, max=%d)",
            self._pool.min_size,
            self._pool.max_size,
        )

    async def close(self) -> None:
        await self._pool.close()
        self._logger.info("Connection pool closed")

    @asynccontextmanager
    async def query(self, sql: str) -> AsyncIterator[PsycopgResultCursor]:
        async with self._pool.connection() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute(sql)
                yield PsycopgResultCursor(cursor)
