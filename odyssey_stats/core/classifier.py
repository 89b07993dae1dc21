"""Split a result row into tags and candidate field columns."""

from collections.abc import Callable
from dataclasses import dataclass

from odyssey_stats.core.passes import DEFAULT_DATABASE, PassConfig
from odyssey_stats.core.rows import ResultRow
from odyssey_stats.core.values import ColumnValue, StringValue


@dataclass(frozen=True)
class ClassifiedRow:
    """Tags of a row plus the columns left over as field candidates."""

    tags: dict[str, str]
    candidates: dict[str, ColumnValue]


def _database_tag(row: ResultRow, config: PassConfig) -> str:
    if config.database_tag:
        match row.get("database"):
            case StringValue(value=name):
                return name
    return DEFAULT_DATABASE


def classify_row(
    row: ResultRow,
    config: PassConfig,
    address: Callable[[], str],
) -> ClassifiedRow:
    """Build the tag set of *row* and collect its field candidates.

    Args:
        row: Decoded result row.
        config: The pass the row belongs to.
        address: Returns the sanitized proxy address for the ``server`` tag.
            Whatever it raises fails the row.
    """
    tags = {"server": address(), "db": _database_tag(row, config)}

    for column in config.tag_columns:
        match row.get(column):
            case StringValue(value=text) if text:
                tags[column] = text

    consumed = set(config.tag_columns)
    if config.database_tag:
        consumed.add("database")

    candidates = {
        column: value
        for column, value in row.values.items()
        if column not in consumed and column not in config.ignored_columns
    }
    return ClassifiedRow(tags=tags, candidates=candidates)
