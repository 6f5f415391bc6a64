"""Logging configuration for jira-cli.

Every record carries a ``context`` attribute rendered as ``key=value`` pairs,
so the lines of one backport run can be told apart by their trace id.
"""

import logging
import os
import sys
import threading
import time
import types
import uuid
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_DIRECTORY = "logs"
DEFAULT_LOGGER_NAME = "jira-cli"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
NO_CONTEXT = "no-context"


class ContextualLogger(logging.Logger):
    """Logger holding per-thread context added to each of its records."""

    def __init__(self, name: str, level: int = 0) -> None:
        super().__init__(name, level)
        self._context_data = threading.local()

    @property
    def _context(self) -> dict[str, Any]:
        if not hasattr(self._context_data, "data"):
            self._context_data.data = {}
        return self._context_data.data

    def format_context(self) -> str:
        """Render the context as ``key=value,...`` or NO_CONTEXT when empty."""
        if not self._context:
            return NO_CONTEXT
        return ",".join(f"{key}={value}" for key, value in self._context.items())

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        extra = {"context": self.format_context(), **(extra or {})}
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def set_context(self, **kwargs: Any) -> None:
        """Add or overwrite context values."""
        self._context.update(kwargs)

    def replace_context(self, context: Mapping[str, Any]) -> None:
        self._context_data.data = dict(context)

    def clear_context(self) -> None:
        self.replace_context({})

    def get_context(self) -> dict[str, Any]:
        """Return a copy of the context of the calling thread."""
        return dict(self._context)


class ContextFilter(logging.Filter):
    """Gives records of plain child loggers the context of their parent."""

    def __init__(self, root_logger: ContextualLogger) -> None:
        super().__init__()
        self.root_logger = root_logger

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = self.root_logger.format_context()
        return True


class LoggingContextManager:
    """
    Tags the records logged inside a ``with`` block with an operation.

    The operation name and a trace id are added to the logger context on entry.
    On exit the previous context comes back and the outcome is logged with the
    elapsed time.

    Args:
        logger: Contextual logger
        operation: Name of the operation, e.g. ``backport``
        **context: Extra context values; a ``trace_id`` here replaces the
            generated one
    """

    def __init__(
        self, logger: ContextualLogger, operation: str, **context: Any
    ) -> None:
        self.logger = logger
        self.operation = operation
        self.trace_id = context.pop("trace_id", None) or uuid.uuid4().hex[:8]
        self.context = {**context, "operation": operation, "trace_id": self.trace_id}
        self.start_time = time.monotonic()
        self._saved_context: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContextManager":
        self._saved_context = self.logger.get_context()
        self.start_time = time.monotonic()
        self.logger.set_context(**self.context)
        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        elapsed = time.monotonic() - self.start_time
        if exc_type is None:
            self.logger.debug(
                f"Operation completed: {self.operation} in {elapsed:.3f}s"
            )
        else:
            self.logger.error(
                f"Operation failed: {self.operation} after {elapsed:.3f}s - {exc_val}"
            )
        self.logger.replace_context(self._saved_context)


def _get_contextual_logger(name: str) -> ContextualLogger:
    logging.setLoggerClass(ContextualLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(logging.Logger)

    if not isinstance(logger, ContextualLogger):
        msg = f"Logger '{name}' was created before setup_logger was called"
        raise TypeError(msg)
    return cast(ContextualLogger, logger)


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configure the contextual logger ``name`` and return it.

    Output goes to stderr, plus a rotating file when ``log_to_file`` is set.
    Handlers from an earlier call for the same name are replaced. ``LOG_LEVEL``,
    ``LOG_FORMAT`` and ``LOG_DIR`` fill in arguments left unset.

    Args:
        name: Logger name
        level: Log level name (DEBUG, INFO, ...)
        log_to_file: Also write to ``<log_dir>/<name>.log``
        log_dir: Directory of the log file
        log_format: Record format

    Raises:
        TypeError: If a plain logger with this name already exists
    """
    logger = _get_contextual_logger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper()))

    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    # stdout is reserved for command output
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_to_file:
        directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                directory / f"{name}.log",
                maxBytes=MAX_LOG_SIZE,
                backupCount=LOG_BACKUP_COUNT,
            )
        )

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    context_filter = ContextFilter(logger)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def log_operation(
    logger: ContextualLogger, operation: str, **context: Any
) -> LoggingContextManager:
    """Shorthand for ``LoggingContextManager(logger, operation, **context)``."""
    return LoggingContextManager(logger, operation, **context)
