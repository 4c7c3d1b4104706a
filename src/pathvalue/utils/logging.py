"""Logging configuration using loguru.

Replaces loguru's default sink with one configured from
LoggingConfig. Console output goes to stderr so CLI results on
stdout stay machine readable.
"""

import sys

from loguru import logger

from pathvalue.config.models import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure loguru logger based on configuration.

    Args:
        config: LoggingConfig with level, format, and file settings.
    """
    logger.remove()

    if config.format == "json":
        fmt = "{message}"
        serialize = True
    else:
        fmt = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - {message}"
        serialize = False

    logger.add(
        sys.stderr,
        format=fmt,
        level=config.level,
        serialize=serialize,
        colorize=config.format == "console",
    )

    if config.file:
        logger.add(
            config.file,
            format=fmt,
            level=config.level,
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    logger.debug("Logging configured: level={} format={}", config.level, config.format)
