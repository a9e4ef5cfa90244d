"""
Logging Configuration - Shared Layer

structlog on top of the standard logging module. Development gets the
coloured console renderer, production gets one JSON object per line.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from cvd_platform.shared.consts import EnumEnvironment


def _resolve_level(level: Optional[str]) -> int:
    name = level or os.environ.get("LOG_LEVEL") or "INFO"
    return getattr(logging, str(name).upper(), logging.INFO)


def _build_handlers(file_path: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if file_path:
        handlers.append(logging.FileHandler(file_path))
    return handlers


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure structlog and the root logger.

    Usually reached through update_logging_from_settings() when the app is
    created; called bare it falls back to the LOG_* environment variables.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO.
        file_path: Optional file to mirror console output into.
        environment: Selects the renderer (JSON in production).
    """
    numeric_level = _resolve_level(level)
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )

    handlers = _build_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    get_logger(__name__).debug(
        "logging.configured",
        level=logging.getLevelName(numeric_level),
        file_path=log_file,
        environment=environment,
    )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from the loaded application settings."""
    try:
        level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=level,
            file_path=settings.logging.file_path,
            environment=str(environment),
        )
    except (AttributeError, OSError) as exc:
        logging.error("Failed to update logging from settings: %s", exc)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
