"""Per-pass configuration for the two console queries run every cycle."""

from dataclasses import dataclass

# Identity columns (moved to tags) and averaged rates that are never emitted
# as fields, whichever query produced them.
IGNORED_COLUMNS: frozenset[str] = frozenset(
    {
        "user",
        "database",
        "pool_mode",
        "avg_req",
        "avg_recv",
        "avg_sent",
        "avg_query",
    }
)

DEFAULT_DATABASE = "postgres"


@dataclass(frozen=True)
class PassConfig:
    """How one query's rows are mapped to metrics.

    Attributes:
        measurement: Name of the measurement emitted for every row.
        query: Literal console query executed for this pass.
        strict_numeric: Coerce fields to int64 (statistics pass) instead of
            passing values through unchanged (pool-status pass).
        tag_columns: Columns copied into tags when they hold a non-empty string.
        database_tag: Use the ``database`` column as the ``db`` tag.
        ignored_columns: Columns never emitted as fields.
    """

    measurement: str
    query: str
    strict_numeric: bool
    tag_columns: tuple[str, ...] = ()
    database_tag: bool = True
    ignored_columns: frozenset[str] = IGNORED_COLUMNS


STATS_PASS = PassConfig(
    measurement="odyssey",
    query="SHOW STATS",
    strict_numeric=True,
)

POOLS_PASS = PassConfig(
    measurement="odyssey_pools",
    query="SHOW POOLS",
    strict_numeric=False,
    tag_columns=("user", "pool_mode"),
)

DEFAULT_PASSES: tuple[PassConfig, ...] = (STATS_PASS, POOLS_PASS)
