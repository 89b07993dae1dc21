"""Core protocols for dependency injection.

Each external collaborator of the collector (driver, metrics sink, metrics
renderer) is reached through one of these protocols.
"""

from odyssey_stats.core.protocols.driver import QueryExecutor, ResultCursor
from odyssey_stats.core.protocols.metrics_renderer import MetricsRenderer
from odyssey_stats.core.protocols.metrics_sink import MetricsSink

__all__ = [
    "MetricsRenderer",
    "MetricsSink",
    "QueryExecutor",
    "ResultCursor",
]
