# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

from trivia_night.src.monitoring.logging.log_color_scheme import ColorScheme
from trivia_night.src.monitoring.logging.log_colored_formatter import ColoredLogFormatter

__all__ = ["ColorScheme", "ColoredLogFormatter"]
