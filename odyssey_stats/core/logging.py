"""Logging setup shared by the collector's long-running services.

``logger.with_context(...)`` returns an adapter whose context is rendered
into every message, so a service can tag its logs once at construction.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter carrying key/value context."""

    def __init__(self, logger: logging.Logger, extra: dict[str, Any] | None = None) -> None:
        super().__init__(logger, extra or {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        if not self.extra:
            return msg, kwargs
        context = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"[{context}] {msg}", kwargs

    def with_context(self, **context: Any) -> "ContextualLogger":
        """Return a child logger with *context* merged into the current one."""
        return ContextualLogger(self.logger, {**self.extra, **context})


class LoggerConfigurator:
    """Configures the root handler and hands out contextual loggers."""

    _configured = False

    @classmethod
    def configure(cls, level: str | int = logging.INFO) -> None:
        """Install a stream handler on the root logger (once) and set *level*."""
        root = logging.getLogger()
        if not cls._configured:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(_FORMAT))
            root.addHandler(handler)
            cls._configured = True
        root.setLevel(level)

    @staticmethod
    def configure_logger(name: str, **context: Any) -> ContextualLogger:
        return ContextualLogger(logging.getLogger(name), context)


logger = LoggerConfigurator.configure_logger("odyssey_stats")
