"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides utilities, constants and enums used across the
other layers: environment and log level names, the database deployment
mode and the structlog configuration helpers.

It must not depend on Infrastructure or Frameworks beyond logging.
"""

from .consts import EnumDatabaseMode, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumDatabaseMode",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
