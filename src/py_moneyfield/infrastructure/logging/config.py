from __future__ import annotations

import logging
import logging.handlers
import sys
from typing import IO, Any

import structlog

from py_moneyfield.infrastructure.config.settings import BaseAppSettings, get_settings

__all__ = ["configure_logging", "get_logger"]


def _resolve_level(level_name: str) -> int:
    """Return logging level from name, INFO when the name is unknown."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def _file_handler(settings: BaseAppSettings) -> logging.Handler:
    if settings.log_rotation == "size":
        return logging.handlers.RotatingFileHandler(
            filename=settings.log_file,  # type: ignore[arg-type]
            maxBytes=max(1024, settings.log_max_bytes),
            backupCount=max(1, settings.log_backup_count),
            encoding="utf-8",
        )
    return logging.handlers.TimedRotatingFileHandler(
        filename=settings.log_file,  # type: ignore[arg-type]
        when=settings.log_rotate_when,
        interval=1,
        backupCount=max(1, settings.log_backup_count),
        utc=settings.log_rotate_utc,
        encoding="utf-8",
    )


def configure_logging(stream: IO[str] | None = None) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    - Field modules log with ``logging.getLogger(__name__)``; the CLI uses
      ``get_logger``. Both end up rendered by the same ProcessorFormatter.
    - JSON or console rendering follows ``settings.json_logs``.
    - In JSON mode with ``LOG_FILE`` set, records go to a rotating file instead of the stream.
    - ``force=True`` drops handlers left over from a previous call.

    stream: optional text stream for the console handler (defaults to sys.stdout).
    """
    settings = get_settings()
    if not settings.logging_enabled:
        logging.basicConfig(handlers=[], level=logging.CRITICAL, force=True)
        structlog.configure(cache_logger_on_first_use=True)
        return

    timestamper = structlog.processors.TimeStamper(fmt="iso")
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    if settings.json_logs:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    if settings.json_logs and settings.log_file:
        handler = _file_handler(settings)
    else:
        handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=pre_chain,
        )
    )

    logging.basicConfig(handlers=[handler], level=_resolve_level(settings.log_level), force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,  # type: ignore[arg-type]
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "py_moneyfield") -> structlog.BoundLogger:
    """Return a structured logger; configure logging on first use or when it is switched off."""
    if not get_settings().logging_enabled or not logging.getLogger().handlers:
        configure_logging()
    return structlog.get_logger(name)
