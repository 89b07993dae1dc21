"""MetricsRenderer protocol for serving collected proxy metrics.

Keeps serialization (the ``/metrics`` endpoint) apart from collection
(``MetricsSink``), so the sink protocol stays free of exposition-format
details.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Protocol for rendering collected metrics into a scrapeable format."""

    @property
    def content_type(self) -> str:
        """MIME type of the rendered body."""
        ...

    def generate(self) -> bytes:
        """Render every collected gauge into the exposition format."""
        ...
