"""
Shared module - Cross-cutting concerns

Constants, enums and logging helpers used by every layer. Nothing in here
may depend on the domain, application or infrastructure packages.
"""

from .consts import EnumEnvironment, EnumHistoryBackend, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumHistoryBackend",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
