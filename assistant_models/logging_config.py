"""Opt-in structured log output for this package.

Events are emitted through stdlib loggers under ``assistant_models`` and are
silent by default (the package logger only carries a ``NullHandler``).  A host
application that routes stdlib logging already sees them; ``configure_logging``
is for callers that want them rendered by structlog without touching the root
logger or the global structlog configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from assistant_models.config import Settings

PACKAGE_LOGGER = "assistant_models"
_HANDLER_NAME = "assistant_models.structlog"


def configure_logging(
    *,
    json_logs: bool = True,
    log_level: str = "WARNING",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a structlog-rendering handler to the ``assistant_models`` logger.

    Calling it again replaces the handler installed by the previous call.
    Records stop propagating to the root logger so they are not emitted twice.

    Args:
        json_logs: When *True* (default), render logs as JSON.
            When *False*, use a colourful console renderer.
        log_level: Level name for the package logger (e.g. ``"DEBUG"``).
        stream: Destination stream; defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level.upper())
    package_logger.propagate = False
    return handler


def configure_from_settings(config: Settings | None = None) -> logging.Handler:
    """Configure logging from ``Settings``, reading the environment when none is given."""
    config = config or Settings()
    return configure_logging(json_logs=config.json_logs, log_level=config.log_level)
