"""Loguru sinks for Hogar.

Importing this module installs the sinks described by the cached settings.
Call :func:`configure_logging` again with other settings to replace them,
for example to drop the file sink in tests.
"""
import sys
from typing import List, Optional

from loguru import logger

from hogar.config.settings import HogarSettings, get_settings

DETAILED_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> | "
    "<level>{extra}</level>"
)
SIMPLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

_handler_ids: List[int] = []


def configure_logging(settings: Optional[HogarSettings] = None) -> List[int]:
    """
    Replace Hogar's sinks with a console sink and, when ``LOG_FILE`` is set,
    a rotating JSON file sink. The log directory is created by the settings.

    Returns:
        Ids of the installed loguru handlers
    """
    settings = settings or get_settings()
    log_format = DETAILED_FORMAT if settings.LOG_FORMAT == "detailed" else SIMPLE_FORMAT

    while _handler_ids:
        logger.remove(_handler_ids.pop())

    _handler_ids.append(logger.add(
        sys.stderr,
        format=log_format,
        level=settings.LOG_LEVEL,
        colorize=True,
        backtrace=True,
        diagnose=True,
    ))

    if settings.LOG_FILE:
        _handler_ids.append(logger.add(
            settings.LOG_FILE,
            format=log_format,
            level=settings.LOG_LEVEL,
            rotation=f"{settings.LOG_ROTATION_SIZE_MB} MB",
            retention=f"{settings.LOG_RETENTION_DAYS} days",
            compression="zip",
            serialize=True,
            backtrace=True,
            diagnose=True,
            enqueue=True,
        ))

    return list(_handler_ids)


def get_logger(name: str):
    """Bind ``name``, prefixed with ``hogar.``, to the shared logger."""
    if not name.startswith("hogar.") and name != "__main__":
        name = f"hogar.{name}"
    return logger.bind(name=name)


# Drop loguru's default stderr sink before installing ours
logger.remove()
configure_logging()
