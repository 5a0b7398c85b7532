# ABOUTME: Configuration package initialization
# ABOUTME: Exports settings classes and logging utilities for the engine

from pathware.config.settings import PathwareSettings, REDIRECT_STATUSES, get_settings
from pathware.config.logging import (
    LoggerConfig,
    LoggingSettings,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "PathwareSettings",
    "REDIRECT_STATUSES",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
