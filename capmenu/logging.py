"""
Logging for capmenu.

Example:
    from capmenu.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Recording started")
    logger.warning("Config file not found")
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

CAPMENU_THEME = Theme({
    "log.time": "dim cyan",
    "log.level.debug": "dim blue",
    "log.level.info": "green",
    "log.level.warning": "yellow",
    "log.level.error": "bold red",
    "log.level.critical": "bold white on red",
    "capmenu.success": "bold green",
    "capmenu.artifact": "cyan",
    "capmenu.size": "dim",
})

# Global console instance
console = Console(theme=CAPMENU_THEME, stderr=True)

_initialized = False


def setup_logging(
    level: str = "INFO",
    show_time: bool = False,
    show_path: bool = False,
    rich_tracebacks: bool = True,
) -> None:
    """
    Initialize capmenu's logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        show_time: Show timestamps in log output
        show_path: Show file path in log output
        rich_tracebacks: Use rich formatting for tracebacks

    Note:
        Only the first call installs a handler. Use set_level() to
        change the level afterwards.
    """
    global _initialized

    if _initialized:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=rich_tracebacks,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logging.basicConfig(
        level=numeric_level,
        handlers=[handler],
        force=True,
    )

    _initialized = True


def set_level(level: str) -> None:
    """Change the root log level, initializing logging if needed."""
    if not _initialized:
        setup_logging(level)
        return
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if not _initialized:
        setup_logging()

    return logging.getLogger(name)


class CapmenuLogger:
    """
    capmenu-specific logger

    Wraps standard logger with helpers for the lines a user actually
    reads after a capture.
    """

    def __init__(self, name: str):
        self.logger = get_logger(name)
        self.console = console

    def debug(self, message: str, *args, **kwargs) -> None:
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self.logger.error(message, *args, **kwargs)

    def success(self, message: str) -> None:
        """Print a success line."""
        from rich.markup import escape

        self.console.print(f"[capmenu.success]✓[/capmenu.success] {escape(message)}")

    def artifact(self, path: str, size: Optional[int] = None) -> None:
        """
        Print the location of a finished capture.

        Args:
            path: Artifact path
            size: Optional size in bytes
        """
        from rich.markup import escape

        msg = f"[capmenu.artifact]{escape(path)}[/capmenu.artifact]"
        if size is not None:
            msg += f" [capmenu.size]({human_size(size)})[/capmenu.size]"
        self.console.print(msg)


def human_size(size: int) -> str:
    """Format a byte count the way `du -h` does."""
    if size < 1024:
        return f"{size}B"
    value = float(size)
    for unit in ("K", "M", "G"):
        value /= 1024
        if value < 1024 or unit == "G":
            break
    return f"{value:.1f}{unit}"


def get_capmenu_logger(name: str) -> CapmenuLogger:
    """
    Get a CapmenuLogger instance for the given module.

    Example:
        logger = get_capmenu_logger(__name__)
        logger.success("Recording saved")
    """
    return CapmenuLogger(name)
