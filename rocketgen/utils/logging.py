"""Logging utilities for the rocket generator."""
import logging
import sys


def setup_logging(name, level=logging.WARNING):
    """Set up a named logger with console output only.

    Log records go to stderr so they never interleave with a rocket
    written to stdout.

    Args:
        name: Logger name (usually the package name)
        level: Minimum level emitted by the console handler

    Returns:
        logging.Logger: Configured logger instance
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove any existing handlers
    logger.handlers = []

    console_formatter = logging.Formatter(
        f'[{name}] %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)

    logger.addHandler(console_handler)

    return logger
