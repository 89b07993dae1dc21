"""Metrics renderer adapters."""

from odyssey_stats.adapters.metrics_renderer.fake import FakeMetricsRenderer
from odyssey_stats.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer", "FakeMetricsRenderer"]
