"""Loguru configuration for the command line entry point."""

import sys

from loguru import logger

from lathe.core.config import Settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

CONSOLE_FORMAT = "<level>{message}</level>"


def configure_logging(settings: Settings) -> None:
    """Configure loguru based on settings.

    Warnings and errors always go to stderr so that task output on stdout
    stays clean. A daily rotated log file is kept under the home directory.
    """
    logger.remove()  # Remove default handler

    level = "DEBUG" if settings.debug else settings.lathe_log_level

    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT if settings.debug else CONSOLE_FORMAT,
        colorize=True,
    )

    if settings.lathe_log_to_file:
        logs_dir = settings.home_dir() / "logs"
        logs_dir.mkdir(exist_ok=True)

        logger.add(
            str(logs_dir / "lathe_{time:YYYY-MM-DD}.log"),
            rotation="1 day",
            retention="7 days",
            level=level,
            format=LOG_FORMAT,
        )
