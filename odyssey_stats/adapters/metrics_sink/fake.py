"""Fake MetricsSink for testing.

Records every ``add_fields()`` call so tests can assert on emitted
metrics without reaching into prometheus-client internals.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class SinkRecord:
    """Single accepted measurement record."""

    measurement: str
    fields: dict[str, Any]
    tags: dict[str, str]


class FakeMetricsSink:
    """In-memory spy implementing the MetricsSink protocol.

    Usage:
        fake = FakeMetricsSink()
        # … inject into OdysseyCollector …
        assert fake.measurements() == ["odyssey", "odyssey_pools"]
    """

    def __init__(self) -> None:
        self.records: list[SinkRecord] = []
        self.begun: list[str] = []

    def begin_measurement(self, measurement: str) -> None:
        self.begun.append(measurement)

    def add_fields(
        self,
        measurement: str,
        fields: Mapping[str, Any],
        tags: Mapping[str, str],
    ) -> None:
        self.records.append(SinkRecord(measurement, dict(fields), dict(tags)))

    # -- test helpers --

    def measurements(self) -> list[str]:
        return [record.measurement for record in self.records]

    def by_measurement(self, measurement: str) -> list[SinkRecord]:
        return [record for record in self.records if record.measurement == measurement]

    def clear(self) -> None:
        """Reset all recorded state."""
        self.records.clear()
        self.begun.clear()
