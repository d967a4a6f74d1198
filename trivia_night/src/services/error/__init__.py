# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

from trivia_night.src.services.error.unified_error_decorator import handle_socket_errors

__all__ = ["handle_socket_errors"]
