"""Structured logging for seasonteams.

structlog and the standard library share one handler: records from uvicorn,
httpx or any other stdlib logger are rendered by the same ProcessorFormatter
as seasonteams' own events, so a request's lines all carry its request_id.

Usage:
    from seasonteams.logging import configure_logging, get_logger

    configure_logging()  # once, from the app lifespan or the CLI callback

    logger = get_logger(__name__)
    logger.info("team_created", team_id="t1", season="2026")

Environment variables (used when no explicit values are passed):
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    LOG_FORMAT: json, console (default: json in production, console otherwise)
    ENVIRONMENT: local, development, production (default: local)
"""

import logging
import logging.config
import os
from typing import Any

import structlog

# Third-party loggers held at WARNING whatever the configured level
QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "supabase", "uvicorn.access")


def _environment() -> str:
    return os.getenv("ENVIRONMENT", "local").lower()


def _add_environment(
    logger: logging.Logger, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    event_dict["environment"] = _environment()
    return event_dict


# Applied to structlog events and to records coming from stdlib loggers
pre_chain: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    _add_environment,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=_environment() != "production",
        exception_formatter=structlog.dev.plain_traceback,
    )


def logging_config(level: str, log_format: str) -> dict[str, Any]:
    """dictConfig for the root logger, rendering through structlog."""
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_format == "json":
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(log_format))

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structlog": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": processors,
                "foreign_pre_chain": pre_chain,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structlog",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
    }


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name; falls back to LOG_LEVEL
        log_format: "json" or "console"; falls back to LOG_FORMAT, then the environment
    """
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    log_format = (
        log_format
        or os.getenv("LOG_FORMAT")
        or ("json" if _environment() == "production" else "console")
    ).lower()

    logging.config.dictConfig(logging_config(level, log_format))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind key/value pairs to every log entry of the current request.

    Example:
        bind_context(request_id="abc123", method="GET", path="/teams")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop bound context so it does not leak into the next request."""
    structlog.contextvars.clear_contextvars()
