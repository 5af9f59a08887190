# shellkit/utils/logger.py
"""
Centralized logging setup for shellkit.

The root logger gets a single `DeferredLogHandler` that buffers records and
hands them to a JSON stderr handler. Buffered records are released when an
ERROR arrives, when the buffer fills, or when `flush_all_handlers()` is called
on the way out of the process.
"""
import logging
import logging.handlers
import os
import sys
from typing import Any, MutableMapping, Optional

from pythonjsonlogger import jsonlogger

from shellkit.utils.config import get_config

_LOGGING_CONFIGURED = False

DEFAULT_BUFFER_CAPACITY = 512


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Extends the standard logging adapter to support structured logging.

    A dictionary passed via `extra` is wrapped under an `extra_data` key so
    that formatters can find it at `record.extra_data`.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        original_extra_content = kwargs.get("extra")
        if original_extra_content is not None:
            kwargs["extra"] = {"extra_data": original_extra_content}
        return msg, kwargs


class DeferredLogHandler(logging.handlers.MemoryHandler):
    """Buffers records until flushed, until a record at `flush_level` or above
    arrives, or until `capacity` records are pending.

    Flushing is idempotent: a second flush with nothing buffered emits nothing.
    """

    def __init__(
        self,
        target: Optional[logging.Handler] = None,
        *,
        capacity: int = DEFAULT_BUFFER_CAPACITY,
        flush_level: int = logging.ERROR,
    ):
        super().__init__(
            capacity, flushLevel=flush_level, target=target, flushOnClose=True
        )

    @property
    def pending(self) -> int:
        """Number of records waiting to be written."""
        return len(self.buffer)

    def flush(self) -> None:
        # Without a target the records stay buffered until one is set.
        super().flush()
        self.acquire()
        try:
            if self.target is not None:
                self.target.flush()
        finally:
            self.release()


def _resolve_level(level: Optional[str] = None) -> int:
    if level is None:
        level = (get_config().get("logging") or {}).get("level")
    level = (level or os.getenv("SHELLKIT_LOG_LEVEL") or "warning").upper()
    return getattr(logging, level, logging.WARNING)


def configure_logging(level: Optional[str] = None, *, force: bool = False) -> None:
    """Install the deferred JSON handler on the root logger.

    Runs once per process unless `force` is set. Calling it again with a
    `level` only adjusts the root level.
    """
    global _LOGGING_CONFIGURED

    root_logger = logging.getLogger()
    if _LOGGING_CONFIGURED and not force:
        if level is not None:
            root_logger.setLevel(_resolve_level(level))
        return

    root_logger.setLevel(_resolve_level(level))
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        jsonlogger.JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    )
    root_logger.addHandler(DeferredLogHandler(console_handler))
    _LOGGING_CONFIGURED = True


def setup_logger(name: str) -> StructuredLoggerAdapter:
    """Return a structured logger for `name`, configuring the root logger on
    first use."""
    configure_logging()
    return StructuredLoggerAdapter(logging.getLogger(name), {})


def flush_all_handlers(logger: Optional[logging.Logger] = None) -> None:
    """Flush every handler attached to `logger` (the root logger by default).

    Safe to call any number of times.
    """
    logger = logger if logger is not None else logging.getLogger()
    for handler in list(logger.handlers):
        handler.flush()
