"""Console query driver adapters."""

from odyssey_stats.adapters.driver.fake import FakeQueryExecutor, FakeResultSet
from odyssey_stats.adapters.driver.postgres import PsycopgQueryExecutor

__all__ = ["PsycopgQueryExecutor", "FakeQueryExecutor", "FakeResultSet"]
