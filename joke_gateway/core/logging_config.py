"""Logging setup for Joke Gateway: one stdout handler, trace ids on every line."""

from __future__ import annotations

import contextvars
import logging
import os
from logging.config import dictConfig
from typing import Optional

# Set per request by TraceIdMiddleware
trace_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar("trace_id", default=None)

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(channel)-14s | [%(trace_id)s] | %(message)s"

# Outbound client chatter; only shown when debugging.
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


class ChannelAliasFilter(logging.Filter):
    """Show short channel names instead of dotted module paths."""

    NAME_MAP = {
        "uvicorn.error": "uvicorn",
        "joke_gateway.main": "app",
        "joke_gateway.api_v1.jokes": "jokes",
        "joke_gateway.core.services.upstream": "upstream",
        "joke_gateway.core.services.name_service": "name_service",
        "joke_gateway.core.services.joke_service": "joke_service",
        "joke_gateway.core.use_cases.tell_joke_use_case": "tell_joke",
        "joke_gateway.core.utils.cancellation": "cancellation",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        record.channel = self.NAME_MAP.get(record.name, record.name)
        return True


class TraceIdFilter(logging.Filter):
    """Inject trace_id from context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = trace_id_ctx.get() or "-"
        return True


def _resolve_log_level(default: Optional[str] = None) -> str:
    """Pick the first valid level from the argument, then LOG_LEVEL, else INFO."""
    for candidate in (default or "", os.getenv("LOG_LEVEL", "")):
        level = candidate.strip().upper()
        if level in VALID_LEVELS:
            return level
    return "INFO"


def configure_logging(default_level: Optional[str] = None) -> str:
    """Configure application-wide logging and return the effective level."""
    level = _resolve_log_level(default_level)
    http_client_level = "INFO" if level == "DEBUG" else "WARNING"

    # uvicorn loggers keep their own level but write through our handler
    loggers = {
        name: {"handlers": ["console"], "level": level, "propagate": False}
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
    }
    loggers.update(
        {
            name: {"handlers": ["console"], "level": http_client_level, "propagate": False}
            for name in HTTP_CLIENT_LOGGERS
        }
    )

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "channel": {"()": ChannelAliasFilter},
                "trace": {"()": TraceIdFilter},
            },
            "formatters": {
                "default": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": level,
                    "stream": "ext://sys.stdout",
                    "filters": ["channel", "trace"],
                },
            },
            "root": {"handlers": ["console"], "level": level},
            "loggers": loggers,
        }
    )
    logging.getLogger(__name__).debug("Logging configured with level %s", level)
    return level
