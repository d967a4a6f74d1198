# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Monitoring package.

Entry points for logging setup and the exception hierarchy.
"""

import logging as std_logging
import sys

import colorama

# Importing the subpackage binds ``logging`` in this namespace; the stdlib
# module is used as ``std_logging`` below.
from trivia_night.src.monitoring.logging.log_colored_formatter import ColoredLogFormatter

_configured = False


def get_logger(name: str) -> std_logging.Logger:
    """Return a named logger; configuration is applied once by setup_logging()."""
    return std_logging.getLogger(name)


def setup_logging(level: str = "INFO", use_colors: bool = True) -> None:
    """
    Install the colored console handler on the root logger.

    Safe to call more than once; later calls only adjust the level.
    """
    global _configured

    root = std_logging.getLogger()
    root.setLevel(level)

    if _configured:
        return

    if use_colors:
        colorama.just_fix_windows_console()

    handler = std_logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColoredLogFormatter(use_colors=use_colors))
    root.addHandler(handler)

    # Socket.IO logs every packet at INFO
    std_logging.getLogger("socketio").setLevel(std_logging.WARNING)
    std_logging.getLogger("engineio").setLevel(std_logging.WARNING)

    _configured = True


__all__ = ["get_logger", "setup_logging"]
