"""MetricsSink protocol for finished measurement records.

The collector hands every metric of a completed pass to a sink and then
forgets about it.  Queuing, export and retry are the sink's business.
Production exposes gauges through Prometheus; tests inject a fake that
records calls in memory.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetricsSink(Protocol):
    """Protocol for accepting tagged measurement records."""

    def begin_measurement(self, measurement: str) -> None:
        """Mark the start of a fresh batch of *measurement* records.

        Called once per completed pass, before its records are added.  A
        sink holding current values drops the series it kept for
        *measurement* so rows that disappeared stop being reported.
        """
        ...

    def add_fields(
        self,
        measurement: str,
        fields: Mapping[str, Any],
        tags: Mapping[str, str],
    ) -> None:
        """Accept one measurement record.

        Args:
            measurement: Measurement name (``odyssey`` or ``odyssey_pools``).
            fields: Field name to value; may be empty.
            tags: Tag name to tag value.
        """
        ...
