"""Logging setup for the ``md-video-embed`` command line tool.

Library modules only create module loggers; handlers are installed here, and
only by the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _build_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the root logger.

    Existing root handlers are removed first, so repeated calls do not
    duplicate output.

    Parameters
    ----------
    log_level : int | str
        Level number or name such as ``"DEBUG"``; unknown names fall back to
        INFO
    log_file : str, optional
        File that receives a copy of every record
    trace_mode : bool, default False
        Include timestamps and logger names in each record

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = _resolve_level(log_level)
    formatter = _build_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Also logging to %s", log_file)

    return root_logger
