"""Column values decoded from a proxy result set.

The driver hands back plain Python objects whose types are only known at
runtime.  ``decode_value`` narrows them into a closed set of variants so the
classifier and coercer can ``match`` on them instead of probing types ad hoc.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from odyssey_stats.core.exceptions import RowDecodeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Int64Value:
    value: int


@dataclass(frozen=True, slots=True)
class Float64Value:
    value: float


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool


@dataclass(frozen=True, slots=True)
class NullValue:
    @property
    def value(self) -> None:
        return None


ColumnValue = Int64Value | Float64Value | StringValue | BoolValue | NullValue


def decode_value(raw: Any) -> ColumnValue:
    """Convert a raw driver value into a ``ColumnValue``.

    Raises:
        RowDecodeError: for integers outside the int64 range, undecodable
            bytes, or any native type outside the supported set.
    """
    match raw:
        case None:
            return NullValue()
        # bool is a subclass of int, so it has to be matched first.
        case bool():
            return BoolValue(raw)
        case int():
            if not INT64_MIN <= raw <= INT64_MAX:
                raise RowDecodeError(f"integer {raw} does not fit in int64")
            return Int64Value(raw)
        case float():
            return Float64Value(raw)
        case Decimal():
            return Float64Value(float(raw))
        case str():
            return StringValue(raw)
        case bytes() | bytearray() | memoryview():
            try:
                return StringValue(bytes(raw).decode("utf-8"))
            except UnicodeDecodeError as exc:
                raise RowDecodeError(f"cannot decode bytes value: {exc}") from exc
        case _:
            raise RowDecodeError(f"unsupported column type {type(raw).__name__}")
