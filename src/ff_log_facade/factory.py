"""
Factory functions creating facades.
"""

from typing import Any

from .backends import Backend, get_backend
from .facade import Logger
from .naming import to_log_name
from .settings import get_settings


def default_backend() -> Backend:
    """Return the backend selected by the ``backend`` setting."""
    return get_backend(get_settings().backend)


def create(name: Any, backend: Backend | None = None) -> Logger:
    """
    Create a facade for the given name.

    If ``name`` is not a string (a module, class, function or any other
    object) the logger is named with :func:`to_log_name`. Facades are not
    cached: the backend is expected to intern its own loggers by name, so
    repeated calls return distinct facades over the same backend logger.

    Args:
        name: Logger name, or an identifier to derive it from
        backend: Backend to obtain the logger from (default: configured backend)

    Returns:
        Logger facade

    Example:
        log = create("my.app.logger")
        log.info("Hello World!")

        log = create(BookStore)  # named "bookstore.BookStore" when defined in bookstore
    """
    log_name = to_log_name(name)
    if backend is None:
        backend = default_backend()
    return Logger(log_name, backend.get_logger(log_name))


# Synonym for create()
get_logger = create

