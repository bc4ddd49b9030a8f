"""
Output configuration for the stdlib backend.

The facade never configures the backend. This module is an opt-in helper for
applications and scripts that want the stdlib backend rendered through
structlog without writing their own handler setup. Settings come from
explicit arguments, then ``FF_LOG_*`` environment variables, then defaults.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from .backends import register_trace_level
from .settings import LogSettings, get_settings

# Handler installed on the root logger by configure_logging()
_HANDLER: logging.Handler | None = None
_CONFIG: LogSettings | None = None
_PREVIOUS_LEVEL: int | None = None


def configure_logging(
    level: str | None = None,
    format: str | None = None,
    add_timestamp: bool | None = None,
    colors: bool | None = None,
    stream=None,
    use_env: bool = True,
) -> None:
    """
    Render stdlib log records with structlog.

    Replaces any handler previously installed by this function.

    Args:
        level: Minimum level of the root logger (TRACE, DEBUG, INFO, WARNING, ERROR)
        format: Output format (console, json)
        add_timestamp: Whether to include timestamps
        colors: Whether to use colors in console output
        stream: Output stream (default: sys.stderr)
        use_env: Whether to read FF_LOG_* environment variables
    """
    global _HANDLER, _CONFIG, _PREVIOUS_LEVEL

    settings = get_settings() if use_env else LogSettings.model_construct()

    # Apply explicit arguments (highest priority)
    overrides: dict[str, Any] = {}
    if level is not None:
        overrides["level"] = level.upper()
    if format is not None:
        overrides["format"] = format.lower()
    if add_timestamp is not None:
        overrides["add_timestamp"] = add_timestamp
    if colors is not None:
        overrides["colors"] = colors
    settings = settings.model_copy(update=overrides)

    register_trace_level()
    numeric_level = logging.getLevelName(settings.level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {settings.level}")

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(settings),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderers(settings),
            ],
        )
    )

    root = logging.getLogger()
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
    else:
        _PREVIOUS_LEVEL = root.level
    root.addHandler(handler)
    root.setLevel(numeric_level)

    _HANDLER = handler
    _CONFIG = settings


def _pre_chain(settings: LogSettings) -> list[Processor]:
    """Processors applied to every stdlib record before rendering."""
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if settings.add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    return processors


def _renderers(settings: LogSettings) -> list[Processor]:
    """Exception handling and rendering processors for the chosen format."""
    if settings.format == "json":
        return [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    if settings.format == "console":
        if settings.colors:
            return [
                structlog.dev.ConsoleRenderer(
                    colors=True,
                    exception_formatter=structlog.dev.rich_traceback,
                )
            ]
        return [structlog.dev.ConsoleRenderer(colors=False)]
    raise ValueError(f"Unknown log format: {settings.format}")


def get_config() -> dict[str, Any]:
    """Get the configuration applied by the last configure_logging() call."""
    if _CONFIG is None:
        return {}
    return _CONFIG.model_dump()


def reset_config() -> None:
    """Remove the installed handler and restore the root level."""
    global _HANDLER, _CONFIG, _PREVIOUS_LEVEL

    if _HANDLER is not None:
        root = logging.getLogger()
        root.removeHandler(_HANDLER)
        root.setLevel(_PREVIOUS_LEVEL)
    _HANDLER = None
    _PREVIOUS_LEVEL = None
    _CONFIG = None
