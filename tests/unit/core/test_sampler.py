"""Unit tests for the background collection sampler."""

import asyncio

import pytest

from odyssey_stats.adapters.driver import FakeQueryExecutor, FakeResultSet
from odyssey_stats.adapters.metrics_sink import FakeMetricsSink
from odyssey_stats.core.collector import OdysseyCollector
from odyssey_stats.core.sampler import CollectorSampler


def _collector(sink: FakeMetricsSink, stats: FakeResultSet | None = None) -> OdysseyCollector:
    executor = FakeQueryExecutor(
        {
            "SHOW STATS": stats or FakeResultSet(["database", "n"], [["app", 1]]),
            "SHOW POOLS": FakeResultSet(["database", "cl_active"], [["app", 2]]),
        }
    )
    return OdysseyCollector(executor, sink, lambda: "host=proxy")


class _SlowCollector:
    """Collector stand-in whose cycle never finishes in time."""

    async def gather(self):
        await asyncio.sleep(10)
        return []


class TestCollectorSampler:
    """Tests for the polling loop around OdysseyCollector."""

    @pytest.mark.asyncio
    async def test_collects_after_one_tick(self):
        sink = FakeMetricsSink()
        sampler = CollectorSampler(_collector(sink), interval=0.01)

        await sampler.start()
        await asyncio.sleep(0.05)
        await sampler.stop()

        assert sampler.cycles >= 1
        assert sampler.failures == 0
        assert "odyssey" in sink.measurements()

    @pytest.mark.asyncio
    async def test_failed_cycle_does_not_crash_loop(self):
        sink = FakeMetricsSink()
        sampler = CollectorSampler(
            _collector(sink, stats=FakeResultSet(["foo"], [["abc"]])),
            interval=0.01,
        )

        await sampler.start()
        await asyncio.sleep(0.05)
        await sampler.stop()

        assert sampler.failures >= 1
        assert sink.records == []

    @pytest.mark.asyncio
    async def test_tick_times_out(self):
        sampler = CollectorSampler(_SlowCollector(), timeout=0.01)

        assert await sampler.tick() is False
        assert sampler.failures == 1

    @pytest.mark.asyncio
    async def test_stop_cancels_cleanly(self):
        sampler = CollectorSampler(_collector(FakeMetricsSink()), interval=0.01)

        await sampler.start()
        await sampler.stop()

        assert sampler._task is None

    @pytest.mark.asyncio
    async def test_stop_is_safe_when_not_started(self):
        sampler = CollectorSampler(_collector(FakeMetricsSink()))

        await sampler.stop()  # no-op
