# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Colored log formatter.

Produces compact single-line console output:

    12:03:44 • roster_application_service  Team joined: Quizzly Bears
"""

import logging
from typing import Any, Dict, Optional

from colorama import Style

from trivia_night.src.monitoring.logging.log_color_scheme import ColorScheme

# Attributes every LogRecord carries; anything else came in through ``extra=``
_STANDARD_RECORD_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class ColoredLogFormatter(logging.Formatter):
    """Formatter adding level colors, symbols and short component names."""

    def __init__(self, use_colors: bool = True, datefmt: str = "%H:%M:%S"):
        super().__init__(datefmt=datefmt)
        self.use_colors = use_colors

    @staticmethod
    def _simplify_component_name(name: str) -> str:
        """Keep only the last segment of a dotted logger name."""
        return name.rsplit(".", 1)[-1]

    @staticmethod
    def format_extra(extra: Optional[Dict[str, Any]]) -> str:
        """Render ``extra=`` fields as `` (key=value, ...)``."""
        if not extra:
            return ""
        parts = [f"{key}={value}" for key, value in extra.items()]
        return f" ({', '.join(parts)})"

    def _extract_extra(self, record: logging.LogRecord) -> Dict[str, Any]:
        return {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
        }

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        timestamp = self.formatTime(record, self.datefmt)
        component = self._simplify_component_name(record.name)
        message = record.getMessage() + self.format_extra(self._extract_extra(record))
        symbol = ColorScheme.symbol_for(level)

        if self.use_colors:
            line = (
                f"{ColorScheme.TIMESTAMP}{timestamp}{Style.RESET_ALL} "
                f"{ColorScheme.color_for(level)}{symbol}{Style.RESET_ALL} "
                f"{ColorScheme.COMPONENT}{component}{Style.RESET_ALL}  "
                f"{ColorScheme.color_for(level)}{message}{Style.RESET_ALL}"
            )
        else:
            line = f"{timestamp} {symbol} {component}  {message}"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
