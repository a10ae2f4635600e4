"""Logging configuration built on the unified settings layer."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from src.config.settings import LoggingSettings, get_settings

# uvicorn's access log duplicates what RequestLoggingMiddleware writes
_QUIETED_LOGGERS = ("uvicorn.access",)


def _build_formatter(environment: str) -> logging.Formatter:
    if environment == "development":
        return logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    return logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )


def setup_logging(settings: Optional[LoggingSettings] = None) -> LoggingSettings:
    """
    Initialize logging for the password validation service.

    Sets up console output, optional size-rotated file output and a
    formatter that depends on the running environment. Calling it again
    replaces the handlers installed by the previous call.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
                 settings will be loaded from environment variables.

    Returns:
        LoggingSettings: The logging configuration used.
    """
    if settings is None:
        settings = get_settings().logging
    app_settings = get_settings().app

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = _build_formatter(app_settings.ENVIRONMENT)

    if settings.LOG_CONSOLE_ENABLED:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if settings.LOG_FILE_ENABLED:
        log_dir = Path(settings.LOG_FILE_PATH).parent
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=settings.LOG_FILE_PATH,
            maxBytes=settings.LOG_FILE_MAX_SIZE,
            backupCount=settings.LOG_FILE_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name in _QUIETED_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging system initialized",
        extra={
            "log_level": settings.LOG_LEVEL,
            "environment": app_settings.ENVIRONMENT,
        }
    )

    return settings


__all__ = [
    "setup_logging",
    "LoggingSettings",
]
