"""Prometheus implementation of the MetricsRenderer protocol.

Serializes the registry shared with ``PrometheusMetricsSink`` so the
``/metrics`` endpoint exposes the gauges of the latest completed pass of
each measurement.
"""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from odyssey_stats.core.protocols.metrics_renderer import MetricsRenderer


class PrometheusMetricsRenderer(MetricsRenderer):
    """Render the gauges held by a CollectorRegistry."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    def generate(self) -> bytes:
        return generate_latest(self._registry)
