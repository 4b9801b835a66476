"""structlog configuration for the fhe-gated CLI and services.

Two renderings:
    production   one JSON object per line, tracebacks as structured dicts
    development  coloured key=value console output

Entries look like:
    {"event": "community_record_skipped", "level": "warning",
     "timestamp": "2026-01-01T00:00:00Z", "service": "CommunityRegistryService",
     "component": "registry", "operation": "list_all",
     "correlation_id": "...", "record_id": "...", "reason": "..."}

The level comes from LOG_LEVEL (default INFO) unless passed explicitly.
"""

import logging
import os
from typing import TextIO, cast

import structlog
from structlog.typing import Processor

from fhe_gated.infrastructure.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name to its logging constant.

    Args:
        level: Level name. Falls back to LOG_LEVEL, then INFO. Unknown names
            resolve to INFO.
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def configure_structlog(
    environment: str = "production",
    log_file: TextIO | None = None,
    level: str | None = None,
) -> None:
    """Configure structlog process-wide.

    Args:
        environment: "production" for JSON lines, anything else for console.
        log_file: Destination stream. Defaults to stdout; the CLI passes
            stderr so command output stays machine-readable.
        level: Minimum level name, overriding LOG_LEVEL.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
    ]

    if environment == "production":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=log_file),
        cache_logger_on_first_use=True,
    )
