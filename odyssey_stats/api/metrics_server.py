"""Sidecar HTTP server exposing collected proxy metrics on ``/metrics``."""

from typing import Optional

from aiohttp import web

from odyssey_stats.core.logging import logger
from odyssey_stats.core.protocols.metrics_renderer import MetricsRenderer


class MetricsServer:
    """aiohttp server that renders metrics on every scrape.

    Args:
        renderer: Produces the response body and content type.
        port: Port to listen on; 0 lets the OS pick one.
        host: Interface to bind.
    """

    def __init__(self, renderer: MetricsRenderer, port: int, host: str = "0.0.0.0"):
        self._renderer = renderer
        self._port = port
        self._host = host
        self._app = web.Application()
        self._app.add_routes([web.get("/metrics", self._handle_metrics)])
        self._runner: Optional[web.AppRunner] = None
        self._logger = logger.with_context(context_base="api", operation="metrics_server")

    async def _handle_metrics(self, request: web.Request) -> web.Response:
        return web.Response(
            body=self._renderer.generate(),
            headers={"Content-Type": self._renderer.content_type},
        )

    async def start(self) -> None:
        """Bind the listening socket and start serving."""
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, host=self._host, port=self._port)
        await site.start()
        self._logger.info(f"Metrics server listening on http://{self._host}:{self._port}/metrics")

    async def stop(self) -> None:
        """Stops the server gracefully."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
