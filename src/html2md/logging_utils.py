#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the html2md command line.

Only the ``html2md`` package logger is configured. Handlers already attached
to the root logger, or to any other logger of the host program, are left in
place, so calling ``html2md.cli.main`` from another program does not disturb
its logging.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "html2md"

# Set on every handler configure_logging installs, so it can replace its own
_HANDLER_NAME = "html2md.cli"


def _remove_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()


def reset_logging() -> None:
    """Remove the handlers installed by :func:`configure_logging`."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_own_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send html2md log records to stderr and, optionally, a file.

    Calling it again replaces the handlers from the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG").
    log_file : str, optional
        Path of a file that receives a copy of every record.
    trace_mode : bool, default False
        Prefix records with a timestamp and the emitting module.

    Returns
    -------
    logging.Logger
        The ``html2md`` package logger.

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_own_handlers(package_logger)
    package_logger.setLevel(resolved_level)
    # records are written here; the host's root handlers would print them twice
    package_logger.propagate = False

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning("Could not create log file %s: %s", log_file, file_error)
    elif log_file:
        package_logger.info("Logging to file: %s", log_file)

    return package_logger
