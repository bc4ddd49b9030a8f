"""
Exception records passed from the facade to its formatting step.
"""

import traceback
from dataclasses import dataclass, field

from .exceptions import InteropError


@dataclass(frozen=True)
class WrappedCause:
    """An interop wrapper, reduced to the foreign exception it carries."""

    cause: BaseException


@dataclass(frozen=True)
class PlainException:
    """A regular exception, reduced to its type name, message and frames."""

    type_name: str
    message: str
    frames: tuple[str, ...] = field(default_factory=tuple)

    def format(self, message: str) -> str:
        """
        Render the record below ``message``.

        Produces ``message``, the ``Type: message`` line, then one
        tab-prefixed line per frame.
        """
        lines = [message, f"{self.type_name}: {self.message}"]
        lines.extend(f"\t{frame}" for frame in self.frames)
        return "\n".join(lines) + "\n"


ExceptionRecord = WrappedCause | PlainException


def exception_type_name(ex: BaseException) -> str:
    cls = type(ex)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def exception_frames(ex: BaseException) -> tuple[str, ...]:
    """Return ``path:lineno:in function`` strings for the exception's traceback."""
    return tuple(
        f"{frame.filename}:{frame.lineno}:in {frame.name}"
        for frame in traceback.extract_tb(ex.__traceback__)
    )


def to_record(ex: BaseException) -> ExceptionRecord:
    """Classify an exception as an interop wrapper or a plain exception."""
    if isinstance(ex, InteropError):
        return WrappedCause(ex.cause)
    return PlainException(
        type_name=exception_type_name(ex),
        message=str(ex),
        frames=exception_frames(ex),
    )
