"""
Custom exceptions for the ff-log-facade package.
"""


class FacadeError(Exception):
    """Base exception for all facade-related errors."""

    pass


class UnknownBackendError(FacadeError, ValueError):
    """Raised when a backend is requested by a name that is not registered."""

    def __init__(self, backend: str, known_backends: list = None):
        self.backend = backend
        self.known_backends = known_backends or []

        if known_backends:
            message = f"Unknown backend: {backend}. Known backends: {', '.join(known_backends)}"
        else:
            message = f"Unknown backend: {backend}"

        super().__init__(message)


class InteropError(Exception):
    """
    Wrapper around an exception raised by foreign code.

    Loggers unwrap it and hand the original ``cause`` to the backend as a
    structured exception instead of formatting the wrapper as text.
    """

    def __init__(self, cause: BaseException, message: str | None = None):
        self.cause = cause
        super().__init__(message or str(cause))
