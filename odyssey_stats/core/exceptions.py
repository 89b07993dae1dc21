"""Error taxonomy for a collection cycle.

Driver and query-execution errors (``psycopg.Error``, pool timeouts) are
not wrapped: they reach the caller unchanged.  The classes below cover the
failures raised by the row-mapping engine itself.
"""


class OdysseyStatsError(Exception):
    """Base class for errors raised while mapping proxy rows to metrics."""


class SchemaDiscoveryError(OdysseyStatsError):
    """The column list of a result set could not be determined."""


class RowDecodeError(OdysseyStatsError):
    """A row could not be decoded into column values."""


class CoercionError(OdysseyStatsError, ValueError):
    """A statistics field value is not a base-10 signed 64-bit integer."""

    def __init__(self, column: str, value: str) -> None:
        super().__init__(f"column {column!r}: cannot parse {value!r} as int64")
        self.column = column
        self.value = value


class ConfigurationError(OdysseyStatsError):
    """The configured proxy address is invalid."""
