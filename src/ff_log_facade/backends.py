"""
Backends the facade delegates to.

A backend hands out named logger handles; each handle answers per-level
enablement checks and emits text at a level, optionally with a structured
exception. Handles are expected to be interned by name by the backend itself
and to be safe for concurrent use.

``stacklevel`` tells a handle which frame to attribute a record to: 1 is the
direct caller of ``log``, higher values skip that many frames further up.
"""

import logging
from typing import Protocol, runtime_checkable

from .exceptions import UnknownBackendError
from .levels import TRACE, canonical


@runtime_checkable
class BackendLogger(Protocol):
    """Named logger handle provided by a backend."""

    name: str

    def is_enabled_for(self, level: str) -> bool: ...

    def log(
        self, level: str, text: str, cause: BaseException | None = None, stacklevel: int = 1
    ) -> None: ...


@runtime_checkable
class Backend(Protocol):
    """Factory of named logger handles."""

    def get_logger(self, name: str) -> BackendLogger: ...


# Facade level -> stdlib numeric level
STDLIB_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class StdlibLogger:
    """
    Handle over a :class:`logging.Logger`.

    Structured exceptions are passed as ``exc_info`` so handlers render the
    traceback natively.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def logger(self) -> logging.Logger:
        """The underlying stdlib logger."""
        return self._logger

    def is_enabled_for(self, level: str) -> bool:
        return self._logger.isEnabledFor(STDLIB_LEVELS[canonical(level)])

    def log(
        self, level: str, text: str, cause: BaseException | None = None, stacklevel: int = 1
    ) -> None:
        # stacklevel 1 is our caller, so one more skips this frame
        self._logger.log(
            STDLIB_LEVELS[canonical(level)], text, exc_info=cause, stacklevel=stacklevel + 1
        )

    def __repr__(self) -> str:
        return f"StdlibLogger(name={self.name!r})"


def register_trace_level() -> None:
    """Register the ``TRACE`` level name with the stdlib logging module."""
    if logging.getLevelName(TRACE) != "TRACE":
        logging.addLevelName(TRACE, "TRACE")


class StdlibBackend:
    """Backend over the standard library ``logging`` hierarchy."""

    def __init__(self):
        register_trace_level()

    def get_logger(self, name: str) -> StdlibLogger:
        return StdlibLogger(logging.getLogger(name))

    def __repr__(self) -> str:
        return "StdlibBackend()"


class NullLogger:
    """
    A zero-cost handle that reports every level as disabled.

    Since the facade checks enablement first, deferred messages are never
    evaluated and nothing is formatted.
    """

    def __init__(self, name: str):
        self.name = name

    def is_enabled_for(self, level: str) -> bool:
        return False

    def log(
        self, level: str, text: str, cause: BaseException | None = None, stacklevel: int = 1
    ) -> None:
        pass

    def __repr__(self) -> str:
        return f"NullLogger(name={self.name!r})"


class NullBackend:
    """Backend discarding all log messages."""

    def get_logger(self, name: str) -> NullLogger:
        return NullLogger(name)

    def __repr__(self) -> str:
        return "NullBackend()"


# Backend type mapping
_BACKEND_TYPES = {
    "stdlib": StdlibBackend,
    "logging": StdlibBackend,  # Alias for stdlib
    "null": NullBackend,
    "none": NullBackend,  # Alias for null
}


def get_backend(backend: str) -> Backend:
    """
    Create a backend by name.

    Args:
        backend: Backend name (stdlib, null)

    Returns:
        Backend instance

    Raises:
        UnknownBackendError: If no backend is registered under that name
    """
    backend_class = _BACKEND_TYPES.get(backend.lower())
    if backend_class is None:
        raise UnknownBackendError(backend, sorted(_BACKEND_TYPES))
    return backend_class()
