"""
Logger facade over a backend logger handle.
"""

import logging
from collections.abc import Callable
from typing import Any

from .backends import BackendLogger
from .exceptions import InteropError
from .levels import LEVELS, canonical, resolve_severity
from .records import to_record

DEFAULT_EXCEPTION_MESSAGE = "Exception:"

Producer = Callable[[], Any]


class Logger:
    """
    Logger-compatible facade over a backend logger handle.

    Methods are provided for each level: trace, debug, info, warn and error,
    with ``fatal`` as an alias of ``error`` and ``warning`` as an alias of
    ``warn``. They have the form (using *info* as example)::

        log = create("name")
        log.info_enabled()                        # Is this level enabled for logging?
        log.info("message")                       # Log message
        log.info(producer=lambda: "message")      # Call producer if enabled and log its value
        log.info(lambda: "message")               # Same, producer given positionally
        log.info("message", ex)                   # Log message with exception message/stack trace
        log.info(ex, producer=lambda: "message")  # Log produced message with exception
        log.info(ex)                              # Log exception with default "Exception:" message

    Exceptions wrapping a foreign cause (:class:`~ff_log_facade.InteropError`)
    are unwrapped and the cause is handed to the backend as a structured
    exception. Other exceptions are formatted into the message text.

    The ``level`` attribute is the default severity of the legacy
    :meth:`add` entry point and of ``<<``. It is a plain attribute and is not
    synchronized: a thread changing it while another calls :meth:`add` may
    observe the previous value.
    """

    def __init__(self, name: str, backend_logger: BackendLogger, level: Any = logging.INFO):
        """
        Initialize a facade.

        Args:
            name: Normalized logger name
            backend_logger: Backend handle for that name
            level: Default severity for :meth:`add` and ``<<``
        """
        self._name = name
        self._logger = backend_logger
        self.level = level

    @property
    def name(self) -> str:
        """Logger name."""
        return self._name

    @property
    def backend_logger(self) -> BackendLogger:
        """Return the underlying backend logger handle."""
        return self._logger

    # Enablement checks

    def trace_enabled(self) -> bool:
        return self._logger.is_enabled_for("trace")

    def debug_enabled(self) -> bool:
        return self._logger.is_enabled_for("debug")

    def info_enabled(self) -> bool:
        return self._logger.is_enabled_for("info")

    def warn_enabled(self) -> bool:
        return self._logger.is_enabled_for("warn")

    def error_enabled(self) -> bool:
        return self._logger.is_enabled_for("error")

    # Logging methods

    def trace(
        self, msg: Any = None, ex: BaseException | None = None, producer: Producer | None = None
    ) -> None:
        """Log a trace message."""
        self._log("trace", msg, ex, producer, stacklevel=2)

    def debug(
        self, msg: Any = None, ex: BaseException | None = None, producer: Producer | None = None
    ) -> None:
        """Log a debug message."""
        self._log("debug", msg, ex, producer, stacklevel=2)

    def info(
        self, msg: Any = None, ex: BaseException | None = None, producer: Producer | None = None
    ) -> None:
        """Log an info message."""
        self._log("info", msg, ex, producer, stacklevel=2)

    def warn(
        self, msg: Any = None, ex: BaseException | None = None, producer: Producer | None = None
    ) -> None:
        """Log a warning message."""
        self._log("warn", msg, ex, producer, stacklevel=2)

    def error(
        self, msg: Any = None, ex: BaseException | None = None, producer: Producer | None = None
    ) -> None:
        """Log an error message."""
        self._log("error", msg, ex, producer, stacklevel=2)

    # Exception logging

    def trace_ex(self, msg: Any, ex: BaseException) -> None:
        self._log_ex("trace", msg, ex, stacklevel=2)

    def debug_ex(self, msg: Any, ex: BaseException) -> None:
        self._log_ex("debug", msg, ex, stacklevel=2)

    def info_ex(self, msg: Any, ex: BaseException) -> None:
        self._log_ex("info", msg, ex, stacklevel=2)

    def warn_ex(self, msg: Any, ex: BaseException) -> None:
        self._log_ex("warn", msg, ex, stacklevel=2)

    def error_ex(self, msg: Any, ex: BaseException) -> None:
        self._log_ex("error", msg, ex, stacklevel=2)

    # Aliases for Logger compatibility
    fatal = error
    fatal_enabled = error_enabled
    fatal_ex = error_ex
    warning = warn
    warning_enabled = warn_enabled
    warning_ex = warn_ex

    # stacklevel counts frames from the caller of a private method up to the
    # code that called the facade; backends use it to attribute records.

    def _log(
        self,
        level: str,
        msg: Any,
        ex: BaseException | None,
        producer: Producer | None,
        stacklevel: int,
    ) -> None:
        if producer is None and callable(msg) and not isinstance(msg, (BaseException, type)):
            msg, producer = None, msg
        if isinstance(msg, BaseException) and ex is None:
            msg, ex = DEFAULT_EXCEPTION_MESSAGE, msg

        enabled = self._logger.is_enabled_for(level)
        if producer is not None and enabled:
            msg = producer()
        if msg is None:
            return
        text = str(msg)
        if not text:
            return

        if ex is not None:
            self._log_ex(level, text, ex, enabled, stacklevel=stacklevel + 1)
        elif enabled:
            self._logger.log(level, text, stacklevel=stacklevel + 1)

    def _log_ex(
        self,
        level: str,
        msg: Any,
        ex: BaseException,
        enabled: bool | None = None,
        stacklevel: int = 2,
    ) -> None:
        if isinstance(ex, InteropError):
            self._logger.log(level, str(msg), ex.cause, stacklevel=stacklevel + 1)
            return

        if enabled is None:
            enabled = self._logger.is_enabled_for(level)
        if not enabled:
            return
        record = to_record(ex)
        self._logger.log(level, record.format(str(msg)), stacklevel=stacklevel + 1)

    # Legacy Logger compatibility

    def add(
        self,
        severity: Any,
        message: Any = None,
        progname: Any = None,
        producer: Producer | None = None,
    ) -> bool:
        """
        Log through the severity-based ``Logger.add`` convention.

        ``severity`` may be a stdlib numeric level or a level name. Anything
        else is logged at ``trace``. ``progname`` and ``message`` are joined
        with ``" - "``; when both are absent nothing is logged.

        Returns:
            Always ``True``
        """
        return self._add(severity, message, progname, producer, stacklevel=2)

    # aliased for Logger compatibility
    log = add

    def __lshift__(self, msg: Any) -> bool:
        return self._add(self.level, msg, None, None, stacklevel=2)

    def _add(
        self,
        severity: Any,
        message: Any,
        progname: Any,
        producer: Producer | None,
        stacklevel: int,
    ) -> bool:
        level = canonical(resolve_severity(severity))
        if level not in LEVELS:
            level = "trace"

        if self._logger.is_enabled_for(level):
            if message is None and producer is not None:
                message = producer()
            parts = [str(part) for part in (progname, message) if part is not None]
            if parts:
                self._log(level, " - ".join(parts), None, None, stacklevel=stacklevel + 1)

        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, level={self.level!r})"
