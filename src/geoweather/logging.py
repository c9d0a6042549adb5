"""Logging configuration for geoweather.

Attaches a single handler to the ``geoweather`` logger, writing either to
stderr or to a log file. Library code only ever calls
``logging.getLogger(__name__)``; nothing is emitted until a host process
(or the CLI) calls ``configure_logging``.
"""
from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER = "geoweather"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level state
_handler: Optional[logging.Handler] = None
_log_path: Optional[Path] = None


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """Configure logging for the geoweather package.

    Replaces any handler installed by a previous call.

    Args:
        level: Logging level, as a number or a name like "DEBUG"
        log_file: Append to this file instead of writing to stderr

    Returns:
        Path to the log file, or None when logging to stderr
    """
    global _handler, _log_path

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    close_logging()

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        _handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        _log_path = path
    else:
        _handler = logging.StreamHandler(sys.stderr)

    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger(ROOT_LOGGER)
    root.addHandler(_handler)
    root.setLevel(level)

    return _log_path


def close_logging() -> None:
    """Detach and close the handler installed by ``configure_logging``."""
    global _handler, _log_path

    if _handler is not None:
        root = logging.getLogger(ROOT_LOGGER)
        root.removeHandler(_handler)
        _handler.close()
        _handler = None
        _log_path = None


def get_current_log_path() -> Optional[Path]:
    """Get the active log file path, or None when not logging to a file."""
    return _log_path


def log_exception(
    error: BaseException,
    context: str = "",
    logger: Optional[logging.Logger] = None,
) -> str:
    """Log an exception with its traceback.

    The message goes out at error level; the traceback at debug level so it
    only shows up when debugging.

    Args:
        error: The exception to log
        context: What was happening when it was raised
        logger: Logger to use (defaults to the package logger)

    Returns:
        User-friendly error message (without traceback)
    """
    logger = logger or logging.getLogger(ROOT_LOGGER)

    error_type = type(error).__name__
    if context:
        user_msg = f"{context}: {error}"
    else:
        user_msg = f"{error_type}: {error}"

    logger.error(user_msg)
    tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    logger.debug(f"{error_type} traceback:\n{tb_str}")

    return user_msg
