# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Console color scheme for log output."""

from colorama import Fore, Style


class ColorScheme:
    """Colors and symbols per log level name."""

    COLORS = {
        "DEBUG": Fore.WHITE + Style.DIM,
        "INFO": Fore.WHITE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    SYMBOLS = {
        "DEBUG": "·",
        "INFO": "•",
        "WARNING": "⚠",
        "ERROR": "✗",
        "CRITICAL": "✗✗",
    }

    COMPONENT = Fore.CYAN
    TIMESTAMP = Style.DIM

    @classmethod
    def color_for(cls, level_name: str) -> str:
        return cls.COLORS.get(level_name, Fore.WHITE)

    @classmethod
    def symbol_for(cls, level_name: str) -> str:
        return cls.SYMBOLS.get(level_name, "•")
