"""
udt_resolver.observability.logging

Structured logging configuration.

Responsibilities:
- Configure `structlog` for JSON logs, or console output during development.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str, json_logs: bool = True) -> None:
    """
    Route structlog events through stdlib logging at the given level.

    JSON lines suit log shippers; console rendering is for local debugging.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    renderer: Any = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    # Level filtering runs first so dropped debug events skip rendering.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: Any) -> None:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.json_logs,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    # Bound to a stdlib logger even before `configure_logging`, so the stdlib
    # level (WARNING by default) drops debug events in unconfigured processes.
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# --- Module Notes -----------------------------------------------------------
# Drivers embedding the resolver usually own logging setup; calling these helpers
# is optional. Resolver events are debug-level; the stdlib level of the
# `udt_resolver` logger decides whether they are emitted.
