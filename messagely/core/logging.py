"""
Logging configuration for the application.

structlog and stdlib records (uvicorn, sqlalchemy) share one pre-chain and
are rendered exactly once, by the ProcessorFormatter on the root handler:
JSON lines in production, coloured console output elsewhere.
"""

import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from asgi_correlation_id import correlation_id

from messagely.config import get_settings

HANDLER_NAME = "messagely"


def add_correlation_id(logger, method_name, event_dict):
    request_id = correlation_id.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def build_formatter(json_logs: bool, pre_chain: list[Any]) -> structlog.stdlib.ProcessorFormatter:
    if json_logs:
        tail = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        tail = [structlog.dev.ConsoleRenderer()]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *tail],
    )


def configure_logging(json_logs: Optional[bool] = None, stream: Optional[TextIO] = None) -> None:
    """Configure structured logging. Safe to call again; the handler is replaced."""
    settings = get_settings()
    if json_logs is None:
        json_logs = settings.ENVIRONMENT == "production"

    shared_processors: list[Any] = [
        add_correlation_id,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(build_formatter(json_logs, shared_processors))

    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.LOG_LEVEL.upper())
