"""Logging utilities."""

# Bounceball Pairing
# Copyright (C) 2025  Bounceball Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from PyQt6 import QtCore

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"
LOG_FILE_NAME = "bounceball-pairing.log"

# one file handler shared by every module logger
_file_handler: Optional[RotatingFileHandler] = None
_file_handler_resolved = False
# console handlers of every module logger, kept so the CLI can quiet them
_console_handlers: List[logging.StreamHandler] = []
_console_level = logging.INFO


def _resolve_log_folder() -> Optional[str]:
    """Find a writable folder for the log file, or None."""
    log_folder = QtCore.QStandardPaths.writableLocation(
        QtCore.QStandardPaths.StandardLocation.AppDataLocation
    )
    if not log_folder:
        log_folder = QtCore.QStandardPaths.writableLocation(
            QtCore.QStandardPaths.StandardLocation.TempLocation
        )
    if not log_folder:
        return None
    return os.path.join(log_folder, "logs")


def _get_file_handler(formatter: logging.Formatter) -> Optional[RotatingFileHandler]:
    global _file_handler, _file_handler_resolved
    if _file_handler_resolved:
        return _file_handler
    _file_handler_resolved = True

    log_folder = _resolve_log_folder()
    if not log_folder:
        return None
    try:
        os.makedirs(log_folder, exist_ok=True)
        # Use RotatingFileHandler to prevent unbounded log growth
        _file_handler = RotatingFileHandler(
            os.path.join(log_folder, LOG_FILE_NAME),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        _file_handler.setFormatter(formatter)
    except OSError:
        # continue with console logging only
        _file_handler = None
    return _file_handler


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up file handler and console handler

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(logging.INFO)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
        if _h in _console_handlers:
            _console_handlers.remove(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(_console_level)
    lgr.addHandler(console_handler)
    _console_handlers.append(console_handler)

    file_handler = _get_file_handler(log_formatter)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr


def set_console_level(level: int) -> None:
    """Set the level of every module's console output.

    The log file keeps receiving INFO records.

    Parameters
    ----------
    level : int
        A ``logging`` level, e.g. ``logging.WARNING``.
    """
    global _console_level
    _console_level = level
    for handler in _console_handlers:
        handler.setLevel(level)
