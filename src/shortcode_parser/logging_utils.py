"""Logging setup for the shortcode-parser command line tool.

Library modules only create module loggers (``logging.getLogger(__name__)``)
and never install handlers; handler setup happens here, at the entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LIBRARY_LOGGER_NAME = "shortcode_parser"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a numeric level or a level name such as ``"debug"`` into an int."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    rich_output: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the command line tool.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    rich_output : bool, default False
        Render console records with ``rich.logging.RichHandler``.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler: logging.Handler
    if rich_output:
        from rich.console import Console
        from rich.logging import RichHandler

        console_handler = RichHandler(
            console=Console(stderr=True), show_time=trace_mode, show_path=trace_mode, markup=False
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
    console_handler.setLevel(resolved_level)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    logging.getLogger(LIBRARY_LOGGER_NAME).setLevel(resolved_level)
    return root_logger
