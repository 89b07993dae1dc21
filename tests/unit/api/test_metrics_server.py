"""Unit tests for the /metrics sidecar server."""

import pytest

from odyssey_stats.adapters.metrics_renderer import FakeMetricsRenderer


class TestMetricsServer:
    """Tests for the MetricsServer handler and lifecycle."""

    @pytest.mark.asyncio
    async def test_handle_metrics_returns_fake_body_and_content_type(self):
        """Handler should delegate to MetricsRenderer.generate() and content_type."""
        from aiohttp.test_utils import make_mocked_request

        from odyssey_stats.api.metrics_server import MetricsServer

        fake = FakeMetricsRenderer()
        server = MetricsServer(fake, port=0)

        request = make_mocked_request("GET", "/metrics")
        response = await server._handle_metrics(request)

        assert response.body == b"# fake metrics\n"
        assert response.content_type == "text/plain"
        assert fake.generate_calls == 1

    @pytest.mark.asyncio
    async def test_start_and_stop_serves_metrics(self):
        """A started server should respond with metrics on /metrics."""
        import aiohttp

        from odyssey_stats.api.metrics_server import MetricsServer

        fake = FakeMetricsRenderer(body=b"odyssey_n 1.0\n")
        server = MetricsServer(fake, port=0, host="127.0.0.1")
        await server.start()

        try:
            site = list(server._runner.sites)[0]
            sock = site._server.sockets[0]
            port = sock.getsockname()[1]

            async with aiohttp.ClientSession() as session:
                async with session.get(f"http://127.0.0.1:{port}/metrics") as resp:
                    assert resp.status == 200
                    assert await resp.read() == b"odyssey_n 1.0\n"
        finally:
            await server.stop()

    @pytest.mark.asyncio
    async def test_stop_is_safe_when_not_started(self):
        """Calling stop() before start() must not raise."""
        from odyssey_stats.api.metrics_server import MetricsServer

        server = MetricsServer(FakeMetricsRenderer(), port=0)
        await server.stop()
