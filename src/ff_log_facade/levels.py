"""
Severity levels understood by the facade.
"""

import logging

# Facade levels, least severe first
LEVELS = ("trace", "debug", "info", "warn", "error")

# Aliases kept for compatibility with other logger conventions
LEVEL_ALIASES = {
    "fatal": "error",
    "warning": "warn",
}

SUPPORTED_LEVELS = frozenset(LEVELS) | frozenset(LEVEL_ALIASES)

# Numeric level registered with the stdlib backend for ``trace``
TRACE = 5

# Well-known numeric severities accepted by the legacy ``add`` entry point
COMPAT_SEVERITIES = {
    logging.CRITICAL: "fatal",
    logging.ERROR: "error",
    logging.WARNING: "warn",
    logging.INFO: "info",
    logging.DEBUG: "debug",
    TRACE: "trace",
}


def canonical(level: str) -> str:
    """Resolve a level alias (``fatal``, ``warning``) to its facade level."""
    return LEVEL_ALIASES.get(level, level)


def resolve_severity(severity) -> str:
    """
    Map a legacy severity to a facade level name.

    Numeric stdlib levels use the compatibility table; anything else is
    stringified and used when it names a supported level. Unrecognized
    severities fall back to ``trace``.
    """
    level = COMPAT_SEVERITIES.get(severity) if isinstance(severity, int) else None
    if level is None:
        level = str(severity).lower()
    if level not in SUPPORTED_LEVELS:
        level = "trace"
    return level
