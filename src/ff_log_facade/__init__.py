"""
ff-log-facade: Logger-compatible facade for Fenixflow applications.

Adapts level-gated, lazily evaluated, exception-aware logging calls onto a
named, leveled logging backend.
"""

__version__ = "0.1.0"

from .backends import Backend, BackendLogger, NullBackend, StdlibBackend, get_backend
from .exceptions import FacadeError, InteropError, UnknownBackendError
from .facade import DEFAULT_EXCEPTION_MESSAGE, Logger
from .factory import create, get_logger
from .levels import LEVELS, TRACE
from .naming import to_log_name

__all__ = [
    "Logger",
    "create",
    "get_logger",
    "to_log_name",
    "Backend",
    "BackendLogger",
    "StdlibBackend",
    "NullBackend",
    "get_backend",
    "FacadeError",
    "InteropError",
    "UnknownBackendError",
    "DEFAULT_EXCEPTION_MESSAGE",
    "LEVELS",
    "TRACE",
]
