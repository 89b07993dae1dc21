"""Convert field candidates into canonical field values."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from odyssey_stats.core.exceptions import CoercionError
from odyssey_stats.core.values import INT64_MAX, INT64_MIN, ColumnValue, Int64Value, StringValue

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int64(column: str, text: str) -> int:
    """Parse *text* as a base-10 signed 64-bit integer.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and out-of-range values raise ``CoercionError``.  Leading
    zeros are allowed in any number.
    """
    if not _INTEGER.fullmatch(text):
        raise CoercionError(column, text)
    sign = "-" if text.startswith("-") else ""
    digits = text.lstrip("+-").lstrip("0") or "0"
    # int64 has at most 19 digits; also keeps int() clear of its digit limit.
    if len(digits) > 19:
        raise CoercionError(column, text)
    number = int(sign + digits)
    if not INT64_MIN <= number <= INT64_MAX:
        raise CoercionError(column, text)
    return number


def coerce_strict(candidates: Mapping[str, ColumnValue]) -> dict[str, int]:
    """Keep integer-looking values only, as int64.

    Native integers pass through, strings are parsed; any other type is
    dropped from the field set.
    """
    fields: dict[str, int] = {}
    for column, value in candidates.items():
        match value:
            case Int64Value(value=number):
                fields[column] = number
            case StringValue(value=text):
                fields[column] = parse_int64(column, text)
            case _:
                logger.debug("Dropping non-integer field %s=%r", column, value.value)
    return fields


def coerce_passthrough(candidates: Mapping[str, ColumnValue]) -> dict[str, Any]:
    """Unwrap every value unchanged."""
    return {column: value.value for column, value in candidates.items()}


def coerce_fields(
    candidates: Mapping[str, ColumnValue],
    *,
    strict_numeric: bool,
) -> dict[str, Any]:
    if strict_numeric:
        return coerce_strict(candidates)
    return coerce_passthrough(candidates)
