"""Runner for the Odyssey statistics collector."""

import asyncio

from odyssey_stats.core.config import settings
from odyssey_stats.core.logging import LoggerConfigurator
from odyssey_stats.core.logging import logger as global_logger
from odyssey_stats.core.metrics_service import OdysseyMetricsService


async def run() -> None:
    """Start the collector service and keep it running until cancelled."""
    logger = global_logger.with_context(context_base="odyssey_stats", operation="runner")
    service = OdysseyMetricsService(settings)

    logger.info("Starting collector for %s", service.server_tag())
    await service.start()
    try:
        await asyncio.Event().wait()
    finally:
        await service.stop()
        logger.info("Collector stopped")


def main() -> None:
    LoggerConfigurator.configure(settings.log_level)
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        print("Shutdown requested... exiting.")


if __name__ == "__main__":
    main()
