"""
Queue-based logging system.

Log records are handed to a background listener thread so request
handlers never block on console or file I/O. The server's own loggers
(uvicorn) are routed through the same queue so every line shares one
format.
"""

import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import Queue

from mev_academy.config.constants import LOG_DATE_FORMAT, LOG_FORMAT, MAX_LOG_QUEUE_SIZE


# Server loggers that share the application's queue and format
SERVER_LOGGERS: tuple[str, ...] = ("uvicorn", "uvicorn.error")

# Third-party loggers held at WARNING
QUIET_LOGGERS: tuple[str, ...] = ("aiohttp", "asyncio", "uvicorn.access")


class MicrosecondFormatter(logging.Formatter):
    """Formatter with microsecond precision timestamps."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ct = datetime.fromtimestamp(record.created)
        return f"{ct.strftime(datefmt or LOG_DATE_FORMAT)}.{ct.microsecond:06d}"


class AsyncLogger:
    """
    Non-blocking logger tree with queue-based output.

    The named logger and every ``attach`` logger get a QueueHandler; a
    QueueListener thread writes the records to console and, optionally,
    a file. Attached loggers stop propagating while the listener runs so
    their records are not written twice.
    """

    def __init__(
        self,
        name: str,
        level: int = logging.INFO,
        log_file: Path | None = None,
        attach: Sequence[str] = (),
    ) -> None:
        """
        Initialize async logger.

        Args:
            name: Root of the application logger tree.
            level: Logging level.
            log_file: Optional file path for logging.
            attach: Names of further loggers to route through the queue.
        """
        self._name = name
        self._level = level
        self._log_file = log_file
        self._attached = tuple(attach)
        self._queue: Queue[logging.LogRecord] = Queue(maxsize=MAX_LOG_QUEUE_SIZE)
        self._queue_handler: QueueHandler | None = None
        self._listener: QueueListener | None = None
        self._saved_propagate: dict[str, bool] = {}

    def _build_handlers(self) -> list[logging.Handler]:
        formatter = MicrosecondFormatter(LOG_FORMAT, LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(self._level)
        handlers: list[logging.Handler] = [console_handler]

        if self._log_file:
            self._log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self._log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG)  # Log everything to file
            handlers.append(file_handler)
        return handlers

    def _loggers(self) -> list[logging.Logger]:
        return [logging.getLogger(n) for n in (self._name, *self._attached)]

    def start(self) -> None:
        """Start the listener and attach the queue handler."""
        if self._listener is not None:
            return

        self._queue_handler = QueueHandler(self._queue)
        for target in self._loggers():
            target.addHandler(self._queue_handler)
            self._saved_propagate[target.name] = target.propagate
            target.propagate = False
        logging.getLogger(self._name).setLevel(self._level)

        self._listener = QueueListener(
            self._queue,
            *self._build_handlers(),
            respect_handler_level=True,
        )
        self._listener.start()

    def stop(self) -> None:
        """Flush pending records and detach the queue handler."""
        if self._listener:
            self._listener.stop()
            for handler in self._listener.handlers:
                handler.close()
            self._listener = None

        if self._queue_handler:
            for target in self._loggers():
                target.removeHandler(self._queue_handler)
                target.propagate = self._saved_propagate.pop(target.name, True)
            self._queue_handler = None

    @property
    def running(self) -> bool:
        return self._listener is not None

    @property
    def logger(self) -> logging.Logger:
        """Get the application root logger."""
        return logging.getLogger(self._name)

    def __enter__(self) -> "AsyncLogger":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    attach: Sequence[str] = SERVER_LOGGERS,
) -> AsyncLogger:
    """
    Set up application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional log file path.
        attach: Further loggers to route through the same queue.

    Returns:
        Started AsyncLogger for the ``mev_academy`` logger tree.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    async_logger = AsyncLogger(
        name="mev_academy",
        level=numeric_level,
        log_file=log_file,
        attach=attach,
    )
    async_logger.start()

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return async_logger
