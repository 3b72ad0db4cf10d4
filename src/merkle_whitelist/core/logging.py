"""
Merkle Whitelist - Logging Configuration
"""

import logging
import sys

import structlog

from merkle_whitelist.core.config import Settings, settings as default_settings


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure structured logging.

    Logs go to stderr; stdout is reserved for the tree dump and proof summary.
    """
    settings = settings or default_settings
    use_json = settings.ENV == "production"

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )
