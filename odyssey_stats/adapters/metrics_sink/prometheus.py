"""Prometheus implementation of the MetricsSink protocol.

Every numeric field becomes a gauge named ``<measurement>_<field>``.  All
gauges share one label set so that rows of either pass fit the same
schema; tags a row does not carry are exported as empty strings.

``begin_measurement`` clears a measurement's series before each new batch,
so a pool or database missing from the latest pass is no longer exported.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from prometheus_client import CollectorRegistry, Gauge

from odyssey_stats.core.protocols.metrics_sink import MetricsSink

logger = logging.getLogger(__name__)

LABEL_NAMES = ("server", "db", "user", "pool_mode")

_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_:]")


def metric_name(measurement: str, field: str) -> str:
    name = _INVALID_NAME_CHARS.sub("_", f"{measurement}_{field}")
    if name[0].isdigit():
        name = f"_{name}"
    return name


class PrometheusMetricsSink(MetricsSink):
    """Prometheus-backed gauges for proxy statistics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()
        self._gauges: dict[str, Gauge] = {}
        # measurement -> names of the gauges it has written to
        self._measurement_gauges: dict[str, set[str]] = {}

    def _gauge(self, name: str, measurement: str, field: str) -> Gauge:
        gauge = self._gauges.get(name)
        if gauge is None:
            gauge = Gauge(
                name,
                f"Odyssey {measurement} field {field}",
                LABEL_NAMES,
                registry=self._registry,
            )
            self._gauges[name] = gauge
        self._measurement_gauges.setdefault(measurement, set()).add(name)
        return gauge

    # -- MetricsSink protocol methods --

    def begin_measurement(self, measurement: str) -> None:
        """Drop every labelled series previously written for *measurement*."""
        for name in self._measurement_gauges.get(measurement, ()):
            self._gauges[name].clear()

    def add_fields(
        self,
        measurement: str,
        fields: Mapping[str, Any],
        tags: Mapping[str, str],
    ) -> None:
        labels = {label: tags.get(label, "") for label in LABEL_NAMES}
        for field, value in fields.items():
            if not isinstance(value, (int, float)):
                logger.debug("Skipping non-numeric field %s.%s=%r", measurement, field, value)
                continue
            name = metric_name(measurement, field)
            self._gauge(name, measurement, field).labels(**labels).set(float(value))
