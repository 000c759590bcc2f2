"""
Logging setup for Docwright.

Provides colorful console logging using the rich library.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper()) if isinstance(level, str) else None
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def create_rich_handler(console: Console = None) -> RichHandler:
    """
    Create a rich console handler.

    Args:
        console: Console to write to (stderr console if not provided)

    Returns:
        Configured RichHandler
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(level: str = "INFO", use_rich: bool = True) -> logging.Logger:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging

    Returns:
        The configured root logger
    """
    numeric_level = _resolve_level(level)

    if use_rich:
        handler = create_rich_handler()
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(f"Logging initialized at {level.upper()} level")
    return root_logger
