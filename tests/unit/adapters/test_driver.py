"""Unit tests for the psycopg driver adapter and its fake."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import psycopg
import pytest

from odyssey_stats.adapters.driver import FakeQueryExecutor, FakeResultSet, PsycopgQueryExecutor
from odyssey_stats.adapters.driver.postgres import PsycopgResultCursor
from odyssey_stats.core.exceptions import RowDecodeError, SchemaDiscoveryError
from odyssey_stats.core.protocols import QueryExecutor, ResultCursor


def _psycopg_cursor(columns, rows, fetch_error=None):
    """AsyncMock standing in for an executed ``psycopg.AsyncCursor``."""
    cursor = MagicMock()
    cursor.description = (
        None if columns is None else [SimpleNamespace(name=name) for name in columns]
    )
    results = [tuple(row) for row in rows]
    results.append(fetch_error if fetch_error is not None else None)
    cursor.fetchone = AsyncMock(side_effect=results)
    return cursor


# ---------------------------------------------------------------------------
# PsycopgResultCursor
# ---------------------------------------------------------------------------


class TestPsycopgResultCursor:
    """Tests for the ResultCursor view over a psycopg cursor."""

    def test_satisfies_protocol(self):
        assert isinstance(PsycopgResultCursor(_psycopg_cursor(["a"], [])), ResultCursor)

    def test_columns_come_from_description(self):
        cursor = PsycopgResultCursor(_psycopg_cursor(["database", "cl_active"], []))

        assert cursor.columns() == ["database", "cl_active"]

    def test_missing_description_is_a_schema_error(self):
        cursor = PsycopgResultCursor(_psycopg_cursor(None, []))

        with pytest.raises(SchemaDiscoveryError):
            cursor.columns()

    @pytest.mark.asyncio
    async def test_iterates_rows_then_stops(self):
        cursor = PsycopgResultCursor(_psycopg_cursor(["a"], [[1], [2]]))

        assert await cursor.next()
        assert tuple(cursor.scan()) == (1,)
        assert await cursor.next()
        assert tuple(cursor.scan()) == (2,)
        assert not await cursor.next()
        assert cursor.err() is None

    @pytest.mark.asyncio
    async def test_fetch_failure_is_reported_by_err(self):
        error = psycopg.OperationalError("server closed the connection")
        cursor = PsycopgResultCursor(_psycopg_cursor(["a"], [[1]], fetch_error=error))

        assert await cursor.next()
        assert not await cursor.next()
        assert cursor.err() is error
        assert not await cursor.next()

    def test_scan_without_row_raises(self):
        cursor = PsycopgResultCursor(_psycopg_cursor(["a"], []))

        with pytest.raises(RowDecodeError):
            cursor.scan()


# ---------------------------------------------------------------------------
# PsycopgQueryExecutor
# ---------------------------------------------------------------------------


class TestPsycopgQueryExecutor:
    """Tests for pool configuration of the psycopg executor."""

    def test_satisfies_protocol(self):
        executor = PsycopgQueryExecutor("host=localhost")
        assert isinstance(executor, QueryExecutor)

    def test_default_pool_is_single_connection(self):
        executor = PsycopgQueryExecutor("host=localhost")

        assert executor._pool.min_size == 1
        assert executor._pool.max_size == 1
        assert executor._pool.kwargs["autocommit"] is True

    def test_idle_is_clamped_to_open(self):
        executor = PsycopgQueryExecutor("host=localhost", max_idle=4, max_open=2)

        assert executor._pool.min_size == 2
        assert executor._pool.max_size == 2

    def test_lifetime_is_forwarded(self):
        executor = PsycopgQueryExecutor("host=localhost", max_lifetime=300.0)

        assert executor._pool.max_lifetime == 300.0


# ---------------------------------------------------------------------------
# FakeQueryExecutor
# ---------------------------------------------------------------------------


class TestFakeQueryExecutor:
    """Tests for the FakeQueryExecutor test helper."""

    @pytest.mark.asyncio
    async def test_records_queries_and_closes_cursors(self):
        fake = FakeQueryExecutor({"SHOW STATS": FakeResultSet(["a"], [[1]])})

        async with fake.query("SHOW STATS") as cursor:
            assert await cursor.next()
            assert not cursor.closed

        assert fake.queries == ["SHOW STATS"]
        assert fake.cursors[0].closed

    @pytest.mark.asyncio
    async def test_cursor_closed_on_error(self):
        fake = FakeQueryExecutor({"Q": FakeResultSet(["a"], [])})

        with pytest.raises(RuntimeError):
            async with fake.query("Q"):
                raise RuntimeError("boom")

        assert fake.cursors[0].closed

    @pytest.mark.asyncio
    async def test_clear_resets_recorded_state(self):
        fake = FakeQueryExecutor()
        async with fake.query("Q"):
            pass
        fake.clear()

        assert fake.queries == []
        assert fake.cursors == []
