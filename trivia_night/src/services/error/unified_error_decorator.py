# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Unified error decorator for Socket.IO event handlers.

Socket handlers are the outermost layer of the server: an exception escaping
one would only be logged by python-socketio, with no context about the event
that caused it. This decorator logs the failure with the handler name and
the error category, then returns None so the session keeps running for all
other connections.
"""

import functools
from typing import Any, Callable, Optional

from trivia_night.src.monitoring import get_logger
from trivia_night.src.monitoring.core.exceptions import get_error_category

logger = get_logger(__name__)


def handle_socket_errors(operation_name: Optional[str] = None) -> Callable:
    """
    Wrap an async socket handler so errors are logged instead of raised.

    Usage:
        @self.sio.on("host:award-points")
        @handle_socket_errors()
        async def handle_award_points(sid, data=None):
            ...

    Args:
        operation_name: Name used in log lines (defaults to the function name)

    Returns:
        Decorated coroutine function
    """
    def decorator(func: Callable) -> Callable:
        name = operation_name or func.__name__

        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                sid = args[0] if args else None
                logger.error(
                    f"Socket handler {name} failed: {e}",
                    exc_info=True,
                    extra={"sid": sid, "category": get_error_category(e)},
                )
                return None

        return wrapper

    return decorator
