# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Custom exception hierarchy.

Only input validation is surfaced to clients; everything else is logged at
the socket boundary and swallowed so one bad event cannot take the session
down for everybody.
"""

from typing import List, Type


class TriviaError(Exception):
    """Base class for all trivia server errors."""
    pass


# ============ Validation ============

class ValidationError(TriviaError):
    """Invalid client input. The message is shown to the player as-is."""

    code = "validation_error"


class TeamNameRequiredError(ValidationError):
    """Team name is empty after trimming."""

    code = "name_required"

    def __init__(self, message: str = "Please enter a team name."):
        super().__init__(message)


class TeamNameTooLongError(ValidationError):
    """Team name exceeds the maximum length."""

    code = "name_too_long"

    def __init__(self, max_length: int = 30):
        self.max_length = max_length
        super().__init__(f"Name too long (max {max_length} chars).")


class TeamNameTakenError(ValidationError):
    """Another active team already uses this name (case-insensitive)."""

    code = "name_taken"

    def __init__(self, name: str = ""):
        self.name = name
        super().__init__("That name is already taken!")


# ============ Configuration ============

class ConfigurationError(TriviaError):
    """Invalid server configuration."""
    pass


# ============ Utilities ============

def get_exception_hierarchy(exc_class: Type[BaseException]) -> List[str]:
    """
    List the TriviaError ancestry of an exception class, most specific first.

    Example:
        >>> get_exception_hierarchy(TeamNameTakenError)
        ['TeamNameTakenError', 'ValidationError', 'TriviaError']
    """
    return [
        cls.__name__
        for cls in exc_class.__mro__
        if isinstance(cls, type) and issubclass(cls, TriviaError)
    ]


def get_error_category(error: BaseException) -> str:
    """
    Categorize an error for logging.

    Returns:
        "validation", "configuration", "trivia" or "unexpected"
    """
    if isinstance(error, ValidationError):
        return "validation"
    if isinstance(error, ConfigurationError):
        return "configuration"
    if isinstance(error, TriviaError):
        return "trivia"
    return "unexpected"
