# ABOUTME: Loguru configuration for the pathware engine
# ABOUTME: Provides unified logging setup with console colorization and optional file output

import sys
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_serialize: bool = False
    console_backtrace: bool = True
    console_diagnose: bool = False

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/pathware.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: str = "gz"

    # Error file output
    error_file_enabled: bool = False
    error_file_level: str = "ERROR"
    error_file_path: Union[str, Path] = "logs/pathware-errors.log"

    # Performance settings
    enqueue: bool = False
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """Logging settings that can be configured via environment variables."""

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(default="txt", validation_alias="LOG_FORMAT")
    log_file_enabled: bool = Field(default=False, validation_alias="LOG_FILE_ENABLED")
    log_file_path: str = Field(default="logs/pathware.log", validation_alias="LOG_FILE_PATH")
    log_console_colorize: bool = Field(default=True, validation_alias="LOG_CONSOLE_COLORIZE")

    model_config = {"env_prefix": "PATHWARE_"}


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    Nothing is configured at import time; applications call this once at startup.

    Args:
        config: Logger configuration. If None, loads it from environment variables.
    """
    if config is None:
        settings = LoggingSettings()
        config = LoggerConfig(
            console_level=settings.log_level.upper(),
            console_serialize=settings.log_format.lower() == "json",
            console_colorize=settings.log_console_colorize,
            file_enabled=settings.log_file_enabled,
            file_path=settings.log_file_path,
            file_level=settings.log_level.upper(),
        )

    # Remove default handler
    logger.remove()
    logger.configure(extra={"name": "pathware"})

    # Add console handler
    if config.console_enabled:
        logger.add(
            sys.stderr,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            serialize=config.console_serialize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    # Add file handler
    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    # Add error file handler
    if config.error_file_enabled:
        error_path = Path(config.error_file_path)
        error_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.error_file_path,
            level=config.error_file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.configure(extra={"name": "pathware"})
    logger.add(
        sys.stdout,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{extra[name]}</cyan> | <level>{message}</level>",
        colorize=False,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )


def configure_for_production() -> None:
    """Configure logging for production environment."""
    config = LoggerConfig(
        console_level="INFO",
        console_colorize=False,
        console_serialize=True,
        console_backtrace=False,
        file_enabled=True,
        file_level="INFO",
        error_file_enabled=True,
        enqueue=True,
    )
    setup_logging(config)


def configure_for_development() -> None:
    """Configure logging for development environment."""
    config = LoggerConfig(
        console_level="DEBUG",
        console_colorize=True,
        console_backtrace=True,
        console_diagnose=True,
    )
    setup_logging(config)
