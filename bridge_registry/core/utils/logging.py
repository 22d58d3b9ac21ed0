"""
Structured logging utilities.

Routes structlog and stdlib logging through one handler, rendering JSON lines
by default and human-readable output for local work.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from bridge_registry.core.config import LoggingConfig, config


# Applied to bridge_registry events and to plain stdlib records alike
EVENT_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
)


def _renderer(logging_config: LoggingConfig, debug: bool) -> list[structlog.types.Processor]:
    if debug or logging_config.format == "console":
        return [structlog.dev.ConsoleRenderer(colors=False)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer(sort_keys=True)]


def _handler(logging_config: LoggingConfig) -> logging.Handler:
    # stdout is left to callers that print repository paths and image tags
    if logging_config.file_path:
        return logging.FileHandler(logging_config.file_path, encoding="utf-8")
    return logging.StreamHandler(sys.stderr)


def configure_logging(logging_config: LoggingConfig | None = None, debug: bool | None = None) -> None:
    """
    Send bridge_registry events through the root logger.

    Args:
        logging_config: Settings to apply (default: config.logging)
        debug: Force console rendering (default: config.debug)
    """
    logging_config = logging_config or config.logging
    debug = config.debug if debug is None else debug

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *EVENT_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = _handler(logging_config)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(EVENT_PROCESSORS),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderer(logging_config, debug),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, logging_config.level.upper(), logging.INFO))


def log_structured(
    logger_obj: Any,
    event: str,
    level: str = "info",
    **context: Any,
) -> None:
    """
    Lightweight structured logging helper.

    Args:
        logger_obj: structlog logger to use.
        event: Event/operation name.
        level: Logging level (debug|info|warning|error|critical).
        **context: Arbitrary key/value metadata.
    """
    log_fn = getattr(logger_obj, level, logger_obj.info)
    log_fn(event, **context)
