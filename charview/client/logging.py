"""Structured logging for the character browser.

Every event carries ``app="charview"``. Modules log key-value events::

    >>> from charview.client.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("page_loaded", page=3, total_pages=42)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

APP_NAME = "charview"
QUIET_LOGGERS = ("httpx", "httpcore")


def add_app_context(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def _build_processors(json_format: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
    ]
    if json_format:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(*, level: str = "INFO", json_format: bool = False) -> None:
    """Configure structlog, and route the HTTP client's own logs at the same level.

    Args:
        level: The logging level name; unknown names fall back to INFO.
        json_format: Render events as JSON lines instead of console text.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    structlog.configure(
        processors=_build_processors(json_format),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=numeric_level,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)
