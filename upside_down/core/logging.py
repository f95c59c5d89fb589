"""
Logging configuration module for the game.

Provides centralized logging setup with colored output using rich, and routes
the catchery error handler through the same output.
"""

import logging

from catchery import ErrorHandler, set_default_handler
from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.

    """
    # Create a rich console for logging
    console = Console(width=120, force_terminal=True, force_jupyter=False)

    # Configure the rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,  # Don't show file path to keep output clean
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
    )

    # Set up the formatter
    rich_handler.setFormatter(
        logging.Formatter(
            "%(name)s - %(levelname)s - %(message)s",
            datefmt="[%X]"
        )
    )

    # Configure the root logger
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )

    # catchery logs through the game logger, which propagates to the rich handler.
    set_default_handler(ErrorHandler(logger=get_logger("upside_down")))


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


# Create a default logger for the game
logger = get_logger("upside_down")
