"""Structured logging for the cells package, driven by LoggingConfig."""

import logging
import sys

import structlog

from cells.config.settings import LoggingConfig


def _renderer(config: LoggingConfig) -> structlog.types.Processor:
    """Pick the final processor for the configured output format."""
    if config.json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Configure structlog from a LoggingConfig.

    The library only emits DEBUG events (resolved orders, matrix sizes,
    sorts), so they are visible only when the configured level is DEBUG.

    Args:
        config: Logging settings; defaults to INFO with console output.
    """
    config = config or LoggingConfig()
    log_level = getattr(logging, config.level)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if config.json_output:
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(config))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically for __name__."""
    return structlog.get_logger(name)
