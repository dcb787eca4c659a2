# kotowaza/logging_config.py
"""
kotowaza/logging_config.py
--------------------------

structlog setup for the catalog.

Library modules log through `get_logger(__name__)`: a structlog logger
wrapped around the standard library logger of the same name. Until an
application calls `configure_logging()`, events are gated by stdlib
levels (WARNING by default), so debug/info events stay silent and nothing
is written to the host program's stdout.

`configure_logging()` installs the processor chain (JSON or console
renderer per `KOTOWAZA_LOG_FORMAT`) and applies `KOTOWAZA_LOG_LEVEL` to
the `kotowaza` logger hierarchy.
"""

import sys
import logging
from typing import Any, Optional

import structlog

from kotowaza.config import LogFormat, Settings, get_settings

LIBRARY_LOGGER = "kotowaza"


def get_logger(name: str) -> Any:
    """
    structlog logger bound to the stdlib logger `name`.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(settings: Optional[Settings] = None, cache_loggers: bool = True) -> None:
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs or human-readable console logs.

    The library never calls this on import; applications embedding the
    catalog opt in. Pass cache_loggers=False when reconfiguring repeatedly
    (tests), since cached loggers keep their first configuration.
    """
    cfg = settings or get_settings()

    # 1. Chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Output format
    if cfg.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    level = logging.getLevelName(cfg.LOG_LEVEL)

    # 3. Configure structlog; rendered events go to stdlib loggers
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )

    # 4. Standard library handlers; basicConfig is a no-op if the host
    # already installed root handlers, the level still applies.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger(LIBRARY_LOGGER).setLevel(level)


__all__ = ["LIBRARY_LOGGER", "get_logger", "configure_logging"]
