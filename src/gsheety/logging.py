"""Logging configuration using loguru.

The library logs under the ``gsheety`` name and stays silent until
``setup_logging`` enables it.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(log_level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure loguru and enable gsheety's log messages.

    Logs go to stderr so that stdout stays free for command output.

    Args:
        log_level: Minimum log level to output
        json_logs: If True, output logs as JSON
    """
    logger.remove()

    if json_logs:
        logger.add(
            sys.stderr,
            format="{message}",
            level=log_level.upper(),
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format=LOG_FORMAT,
            level=log_level.upper(),
            colorize=sys.stderr.isatty(),
        )

    logger.enable("gsheety")


__all__ = ["logger", "setup_logging"]
