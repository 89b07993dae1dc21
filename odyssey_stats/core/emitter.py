"""Metric records and their hand-off to a ``MetricsSink``."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from odyssey_stats.core.protocols.metrics_sink import MetricsSink


@dataclass(frozen=True)
class Metric:
    """One measurement record: name, tag set and field set.

    Tags and fields are copied into read-only mappings on construction.
    An empty field set is allowed; the sink decides whether to drop it.
    """

    measurement: str
    tags: Mapping[str, str]
    fields: Mapping[str, Any]

    def __post_init__(self) -> None:
        if not self.measurement:
            raise ValueError("measurement name must not be empty")
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


def emit(sink: MetricsSink, metric: Metric) -> None:
    """Forward *metric* to *sink*."""
    sink.add_fields(metric.measurement, dict(metric.fields), dict(metric.tags))
