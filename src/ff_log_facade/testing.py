"""
Capturing backend for tests.

Useful for verifying that your code logs the right things through the facade.
"""

from dataclasses import dataclass
from typing import Iterable

from .levels import LEVELS, canonical


@dataclass(frozen=True)
class CapturedEntry:
    """A single backend call."""

    logger: str
    level: str
    text: str
    cause: BaseException | None = None


class CaptureLogger:
    """Handle recording every call it receives into its backend's entries."""

    def __init__(self, name: str, backend: "CaptureBackend"):
        self.name = name
        self._backend = backend

    def is_enabled_for(self, level: str) -> bool:
        self._backend.checks.append((self.name, canonical(level)))
        return canonical(level) in self._backend.enabled

    def log(
        self, level: str, text: str, cause: BaseException | None = None, stacklevel: int = 1
    ) -> None:
        self._backend.entries.append(CapturedEntry(self.name, canonical(level), text, cause))


class CaptureBackend:
    """
    Backend capturing log calls instead of writing them.

    Entries are recorded whether or not the level is enabled, so tests see
    exactly what the facade handed over. Handles are interned by name.
    """

    def __init__(self, enabled: Iterable[str] = LEVELS):
        """
        Initialize a capture backend.

        Args:
            enabled: Levels reported as enabled (default: all)
        """
        self.enabled = {canonical(level) for level in enabled}
        self.entries: list[CapturedEntry] = []
        self.checks: list[tuple[str, str]] = []
        self._loggers: dict[str, CaptureLogger] = {}

    def get_logger(self, name: str) -> CaptureLogger:
        if name not in self._loggers:
            self._loggers[name] = CaptureLogger(name, self)
        return self._loggers[name]

    def texts(self, level: str | None = None) -> list[str]:
        """Get captured texts, optionally only those at ``level``."""
        return [e.text for e in self.entries if level is None or e.level == canonical(level)]

    def clear(self) -> None:
        """Clear captured entries and enablement checks."""
        self.entries.clear()
        self.checks.clear()
