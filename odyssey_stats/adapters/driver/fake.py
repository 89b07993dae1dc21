"""Fake QueryExecutor for testing.

Serves canned result sets keyed by query text and records what was
executed and released, so tests can drive the collector without a proxy.
"""

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

from odyssey_stats.core.exceptions import RowDecodeError, SchemaDiscoveryError


@dataclass
class FakeResultSet:
    """Canned result of one query.

    ``query_error`` is raised when the query is executed, ``columns_error``
    when the column list is requested, and ``fetch_error`` is reported by
    ``err()`` once all rows were returned.
    """

    columns: Sequence[str] | None = ()
    rows: Sequence[Sequence[Any]] = ()
    query_error: BaseException | None = None
    columns_error: BaseException | None = None
    fetch_error: BaseException | None = None


@dataclass
class FakeResultCursor:
    """In-memory ResultCursor over a ``FakeResultSet``."""

    result: FakeResultSet
    closed: bool = False
    _position: int = field(default=-1, repr=False)
    _err: BaseException | None = field(default=None, repr=False)

    def columns(self) -> list[str]:
        if self.result.columns_error is not None:
            raise self.result.columns_error
        if self.result.columns is None:
            raise SchemaDiscoveryError("query did not return a result set")
        return list(self.result.columns)

    async def next(self) -> bool:
        self._position += 1
        if self._position < len(self.result.rows):
            return True
        self._err = self.result.fetch_error
        return False

    def scan(self) -> Sequence[Any]:
        if not 0 <= self._position < len(self.result.rows):
            raise RowDecodeError("scan called without a current row")
        return self.result.rows[self._position]

    def err(self) -> BaseException | None:
        return self._err


class FakeQueryExecutor:
    """In-memory spy implementing the QueryExecutor protocol.

    Usage:
        fake = FakeQueryExecutor({"SHOW STATS": FakeResultSet(["database"], [["app"]])})
        # … inject into OdysseyCollector …
        assert fake.queries == ["SHOW STATS", "SHOW POOLS"]
        assert all(cursor.closed for cursor in fake.cursors)
    """

    def __init__(self, results: dict[str, FakeResultSet] | None = None) -> None:
        self.results: dict[str, FakeResultSet] = dict(results or {})
        self.queries: list[str] = []
        self.cursors: list[FakeResultCursor] = []

    def set_result(self, sql: str, result: FakeResultSet) -> None:
        self.results[sql] = result

    @asynccontextmanager
    async def query(self, sql: str) -> AsyncIterator[FakeResultCursor]:
        self.queries.append(sql)
        result = self.results.get(sql, FakeResultSet())
        if result.query_error is not None:
            raise result.query_error
        cursor = FakeResultCursor(result)
        self.cursors.append(cursor)
        try:
            yield cursor
        finally:
            cursor.closed = True

    # -- test helpers --

    def clear(self) -> None:
        """Forget executed queries and cursors, keep canned results."""
        self.queries.clear()
        self.cursors.clear()
