"""Structured logging setup.

structlog events are handed to a stdlib handler on the ``trade_planner``
logger and rendered there by a ``ProcessorFormatter``, either as JSON lines or
as console text. The handler writes to stderr so command output on stdout
stays machine-readable.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from trade_planner.config import LogFormat, get_settings

PACKAGE_LOGGER = "trade_planner"

_SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def build_renderer(log_format: LogFormat, stream: TextIO) -> list[Processor]:
    """Final processors for one output format."""
    if log_format == LogFormat.JSON:
        return [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    colors = bool(getattr(stream, "isatty", lambda: False)())
    return [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        structlog.dev.ConsoleRenderer(colors=colors),
    ]


def configure_logging(
    level: str,
    log_format: LogFormat,
    *,
    stream: TextIO | None = None,
) -> None:
    """Route package logs to ``stream`` at ``level``.

    Calling it again replaces the previous handler.
    """
    target = sys.stderr if stream is None else stream

    handler = logging.StreamHandler(target)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=build_renderer(log_format, target),
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level))
    package_logger.propagate = False

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def setup_logging() -> None:
    """Configure logging from settings."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structured logger; use names under ``trade_planner``."""
    return structlog.get_logger(name)


def log_trade_plan(
    logger: structlog.stdlib.BoundLogger,
    *,
    direction: str,
    entry_price: float,
    position_size: int,
    has_ticket: bool,
    **kwargs: Any,
) -> None:
    """Log a valid trade plan."""
    logger.info(
        "trade_planned",
        direction=direction,
        entry_price=entry_price,
        position_size=position_size,
        has_ticket=has_ticket,
        **kwargs,
    )


def log_trade_rejected(
    logger: structlog.stdlib.BoundLogger,
    *,
    errors: list[str],
    warnings: list[str],
    **kwargs: Any,
) -> None:
    """Log a plan rejected by validation."""
    logger.warning(
        "trade_rejected",
        errors=errors,
        warnings=warnings,
        **kwargs,
    )
