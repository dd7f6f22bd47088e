"""Observability – structlog logger helper and root logging setup."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to the stdlib logger *name*.

    Events go through the stdlib logger, so they obey its level and handlers
    and stay silent until the application configures logging.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


def configure_logging(level: int | str | None = None, *, json: bool | None = None) -> None:
    """Configure structlog and the root logger.

    Arguments left as ``None`` come from :class:`~mp_option.config.OptionSettings`:
    *level* from ``log_level`` and *json* from ``json_logs``. With ``json=False``
    events are rendered for the console instead of as JSON lines.
    """
    if level is None or json is None:
        from mp_option.config import get_settings

        settings = get_settings()
        if level is None:
            level = settings.log_level_number
        if json is None:
            json = settings.json_logs

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    renderer: Any = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["configure_logging", "get_logger"]
