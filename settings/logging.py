"""Logging configuration."""

import logging
import sys

from loguru import logger

from settings import LOG_DIR

# Per-request debug lines from these are already covered by upstream_client
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "INFO", to_file: bool = True):
    """Configure loguru console + optional rotated file sink, and quiet httpx."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "blog_metadata_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
