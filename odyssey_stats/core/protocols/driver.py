"""QueryExecutor / ResultCursor protocols for the proxy's SQL console.

Abstracts the database driver so the collector depends on a protocol
rather than a concrete library.  Production uses psycopg against the
proxy's admin console; tests inject a fake with canned result sets.
"""

from collections.abc import Sequence
from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResultCursor(Protocol):
    """Forward-only view over one executing result set."""

    def columns(self) -> list[str]:
        """Return the ordered column names of the result set.

        Raises:
            SchemaDiscoveryError: if the statement produced no result set.
        """
        ...

    async def next(self) -> bool:
        """Advance to the next row.

        Returns ``False`` when the set is exhausted *or* fetching failed;
        in the latter case ``err()`` reports the failure.
        """
        ...

    def scan(self) -> Sequence[Any]:
        """Return the raw values of the current row, in column order."""
        ...

    def err(self) -> BaseException | None:
        """Return the error that ended iteration, if any."""
        ...


@runtime_checkable
class QueryExecutor(Protocol):
    """Protocol for executing a literal console query."""

    def query(self, sql: str) -> AbstractAsyncContextManager[ResultCursor]:
        """Execute *sql* and yield a cursor over its rows.

        The cursor (and the connection backing it) is released when the
        ``async with`` block exits, whether normally or by exception.
        """
        ...
