"""Row scanning: turn a ``ResultCursor`` into ``ResultRow`` objects."""

from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from odyssey_stats.core.exceptions import RowDecodeError, SchemaDiscoveryError
from odyssey_stats.core.protocols.driver import ResultCursor
from odyssey_stats.core.values import ColumnValue, decode_value


@dataclass(frozen=True)
class ResultRow:
    """One decoded row: ordered column names plus a name-to-value mapping."""

    columns: tuple[str, ...]
    values: Mapping[str, ColumnValue]

    def get(self, column: str) -> ColumnValue | None:
        """Return the value of *column*, or ``None`` if the row has no such column."""
        return self.values.get(column)

    def __contains__(self, column: object) -> bool:
        return column in self.values


def discover_columns(cursor: ResultCursor) -> tuple[str, ...]:
    """Read the column list of a result set and check names are unique."""
    columns = tuple(cursor.columns())
    seen: set[str] = set()
    for name in columns:
        if name in seen:
            raise SchemaDiscoveryError(f"duplicate column {name!r} in result set")
        seen.add(name)
    return columns


def decode_row(columns: tuple[str, ...], raw: tuple) -> ResultRow:
    if len(raw) != len(columns):
        raise RowDecodeError(f"expected {len(columns)} values in row, got {len(raw)}")
    values = {name: decode_value(item) for name, item in zip(columns, raw)}
    return ResultRow(columns=columns, values=MappingProxyType(values))


async def scan_rows(cursor: ResultCursor) -> AsyncIterator[ResultRow]:
    """Yield every row of *cursor* as a ``ResultRow``.

    Columns are discovered once for the whole set.  After the last row the
    cursor's end-of-iteration error, if any, is raised, so a consumer that
    only acts once the generator is exhausted never sees a partial set.
    """
    columns = discover_columns(cursor)
    while await cursor.next():
        yield decode_row(columns, tuple(cursor.scan()))

    err = cursor.err()
    if err is not None:
        raise err
