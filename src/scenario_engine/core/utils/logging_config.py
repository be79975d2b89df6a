"""Structured logging for the scenario engine.

structlog is configured once per process. Console rendering is the default;
``json_output=True`` switches to one JSON object per line for headless runs.
The minimum level follows ``settings.debug`` unless given explicitly.
"""

from __future__ import annotations

import logging

import structlog

_configured = False


def configure_logging(level: int | None = None, json_output: bool = False) -> None:
    """Configure structlog processors once.

    Later calls are no-ops until reset_logging() is called.

    Args:
        level: Minimum stdlib level (e.g. logging.INFO). Defaults to DEBUG
            when settings.debug is set, INFO otherwise.
        json_output: Render events as JSON instead of the console format.
    """
    global _configured
    if _configured:
        return

    if level is None:
        from scenario_engine.core.config import settings

        level = logging.DEBUG if settings.debug else logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def reset_logging() -> None:
    """Forget the current configuration (used by tests)."""
    global _configured
    structlog.reset_defaults()
    _configured = False


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound with ``logger_name=name``."""
    configure_logging()
    return structlog.get_logger(logger_name=name)
