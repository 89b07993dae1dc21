"""Metrics sink adapters."""

from odyssey_stats.adapters.metrics_sink.fake import FakeMetricsSink
from odyssey_stats.adapters.metrics_sink.prometheus import PrometheusMetricsSink

__all__ = ["PrometheusMetricsSink", "FakeMetricsSink"]
