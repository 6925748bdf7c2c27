"""Logging estructurado (structlog).

Por qué structlog:
- Eventos con contexto (modelo, path) en vez de strings sueltos.
- JSON para pipelines, consola legible para desarrollo.

Nota: los logs nunca incluyen el body de la respuesta; eso es cosa de
`MapError` (solo en debug) y del operador `debug_json`.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name

from core.config import AppSettings, get_settings


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configura logging stdlib + structlog según `AppSettings`."""

    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_logger_name,
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger structlog sobre `logging.getLogger(name)`.

    Aunque no se llame a `configure_logging`, los eventos pasan por stdlib
    (nivel WARNING por defecto) y nunca se imprimen directamente en stdout.
    """

    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
