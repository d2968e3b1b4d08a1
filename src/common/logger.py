"""Logging utilities with rich output for the dtcg-lint command line.

This module provides a centralized logging configuration that combines
Python's standard logging with rich's console output.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Validating tokens.json...")
    logger.warning("Skipping fix-3: target no longer exists")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Global console instances for consistent output
console = Console()
err_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,  # Reporters use rich markup in messages
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("3 errors, 1 warning")
        3 errors, 1 warning
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Allow propagation for test frameworks (pytest caplog)
    logger.propagate = True

    return logger


# Convenience functions for common CLI output
def progress(message: str) -> None:
    """Print a progress message without the logger prefix.

    Example:
        >>> progress("Collecting fixes...")
        Collecting fixes...
    """
    console.print(message)


def success(message: str) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("tokens.json is valid")
        ✓ tokens.json is valid
    """
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning message with yellow warning icon."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print an error message with red X icon to stderr."""
    err_console.print(f"[red]✗[/red] {message}")
