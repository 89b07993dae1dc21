"""One collection cycle against the proxy's admin console.

Each configured pass runs its query, maps every row through the classifier
and coercer, and produces one ``Metric`` per row.  A pass's metrics are
handed to the sink only after its whole result set was read cleanly.  The
first error aborts the cycle: the failing pass emits nothing and later
passes are not run, while passes that already completed stay emitted.
"""

import logging
from collections.abc import Callable, Sequence

from odyssey_stats.core.classifier import classify_row
from odyssey_stats.core.coercer import coerce_fields
from odyssey_stats.core.emitter import Metric, emit
from odyssey_stats.core.passes import DEFAULT_PASSES, PassConfig
from odyssey_stats.core.protocols.driver import QueryExecutor
from odyssey_stats.core.protocols.metrics_sink import MetricsSink
from odyssey_stats.core.rows import ResultRow, scan_rows

logger = logging.getLogger(__name__)


def process_row(
    row: ResultRow,
    config: PassConfig,
    address: Callable[[], str],
) -> Metric:
    """Map a single row to a metric according to *config*."""
    classified = classify_row(row, config, address)
    fields = coerce_fields(classified.candidates, strict_numeric=config.strict_numeric)
    return Metric(measurement=config.measurement, tags=classified.tags, fields=fields)


class OdysseyCollector:
    """Runs the statistics and pool-status passes and emits their metrics.

    Args:
        executor: Executes console queries.
        sink: Receives the metrics of each successful cycle.
        address: Returns the ``server`` tag value; called once per row.
        passes: Pass configurations, run in order.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        sink: MetricsSink,
        address: Callable[[], str],
        passes: Sequence[PassConfig] = DEFAULT_PASSES,
    ) -> None:
        self._executor = executor
        self._sink = sink
        self._address = address
        self._passes = tuple(passes)

    async def run_pass(self, config: PassConfig) -> list[Metric]:
        """Execute one pass and return its metrics without emitting them."""
        async with self._executor.query(config.query) as cursor:
            return [process_row(row, config, self._address) async for row in scan_rows(cursor)]

    async def gather(self) -> list[Metric]:
        """Run a full cycle and return the metrics handed to the sink.

        Each pass is emitted as soon as its result set completed, so a
        failing later pass does not take back what an earlier one emitted.
        """
        metrics: list[Metric] = []
        for config in self._passes:
            pass_metrics = await self.run_pass(config)
            self._sink.begin_measurement(config.measurement)
            for metric in pass_metrics:
                emit(self._sink, metric)
            metrics.extend(pass_metrics)

        logger.debug("Collected %d metrics from %d passes", len(metrics), len(self._passes))
        return metrics
