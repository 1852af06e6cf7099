"""Structured logging for registry events and the lookup command line.

Events are rendered as JSON lines on stderr so that stdout only ever carries
resolved messages.
"""

from __future__ import annotations

import logging
import sys

import structlog


def resolve_log_level(level: int | str) -> int:
    """Turn ``"debug"``, ``"WARNING"`` or a numeric level into a logging level.

    Raises:
        ValueError: the name is not a registered logging level.
    """

    if isinstance(level, int):
        return level
    levels = logging.getLevelNamesMapping()
    try:
        return levels[level.strip().upper()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {level!r}; expected one of {', '.join(sorted(levels))}"
        ) from None


def configure_logging(level: int | str = logging.INFO) -> None:
    numeric_level = resolve_log_level(level)
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.set_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = ["configure_logging", "logger", "resolve_log_level"]
