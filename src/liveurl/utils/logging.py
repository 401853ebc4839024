"""utils/logging.py

Structlog configuration: JSON in production, console output otherwise.

LiveURL emits debug events (``url.rejected``, ``url.href_reset``,
``search_params.synced``) through structlog but never configures logging on
import; applications call :func:`configure_logging` when they want them.
"""

import logging
import sys
from typing import Any, List, Optional

import structlog

from liveurl.config import get_settings


def configure_logging(
    environment: Optional[str] = None, log_level: Optional[str] = None
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        environment: ``"production"`` for newline-delimited JSON, anything
            else for the console renderer. Defaults to the configured
            ``LIVEURL_ENVIRONMENT``.
        log_level: Standard level name, e.g. ``"DEBUG"``. Defaults to the
            configured ``LIVEURL_LOG_LEVEL``.
    """
    settings = get_settings()
    environment = environment or settings.environment
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    shared_processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if environment == "production":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)


def get_logger(name: str) -> Any:
    """
    Return a structlog logger backed by the stdlib logger *name*.

    Events go through the stdlib level filter, so LiveURL stays silent
    until the application enables the ``liveurl`` loggers.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
