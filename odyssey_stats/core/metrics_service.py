"""Lifecycle facade for a running collector process.

Owns the connection pool, the ``/metrics`` sidecar and the polling sampler
behind a single start/stop API, so ``main.py`` only deals with one object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import CollectorRegistry

from odyssey_stats.adapters.driver import PsycopgQueryExecutor
from odyssey_stats.adapters.metrics_renderer import PrometheusMetricsRenderer
from odyssey_stats.adapters.metrics_sink import PrometheusMetricsSink
from odyssey_stats.core.address import sanitized_address
from odyssey_stats.core.collector import OdysseyCollector
from odyssey_stats.core.passes import DEFAULT_PASSES
from odyssey_stats.core.sampler import CollectorSampler

if TYPE_CHECKING:
    from odyssey_stats.api.metrics_server import MetricsServer
    from odyssey_stats.core.config import Settings


class OdysseyMetricsService:
    """Wires executor, Prometheus sink, collector, sampler and server together."""

    def __init__(self, settings: Settings, registry: CollectorRegistry | None = None) -> None:
        self._settings = settings
        self.registry = registry or CollectorRegistry()
        self.executor = PsycopgQueryExecutor(
            settings.ODYSSEY_ADDRESS,
            max_idle=settings.ODYSSEY_MAX_IDLE,
            max_open=settings.ODYSSEY_MAX_OPEN,
            max_lifetime=settings.ODYSSEY_MAX_LIFETIME,
            timeout=settings.ODYSSEY_CONNECT_TIMEOUT,
        )
        self.sink = PrometheusMetricsSink(self.registry)
        self.collector = OdysseyCollector(
            self.executor,
            self.sink,
            self.server_tag,
            passes=DEFAULT_PASSES,
        )
        self._renderer = PrometheusMetricsRenderer(self.registry)
        self._server: MetricsServer | None = None
        self._sampler: CollectorSampler | None = None

    def server_tag(self) -> str:
        return sanitized_address(
            self._settings.ODYSSEY_ADDRESS,
            self._settings.ODYSSEY_OUTPUT_ADDRESS,
        )

    async def start(self) -> None:
        """Open the pool, then start the metrics server and the sampler."""
        from odyssey_stats.api.metrics_server import MetricsServer

        await self.executor.open()
        self._server = MetricsServer(
            self._renderer,
            self._settings.METRICS_PORT,
            self._settings.METRICS_HOST,
        )
        await self._server.start()
        self._sampler = CollectorSampler(
            self.collector,
            interval=self._settings.POLL_INTERVAL,
            timeout=self._settings.GATHER_TIMEOUT,
        )
        await self._sampler.start()

    async def stop(self) -> None:
        """Stop sampler, server, then pool (reverse start order)."""
        try:
            if self._sampler:
                await self._sampler.stop()
            if self._server:
                await self._server.stop()
        finally:
            await self.executor.close()
