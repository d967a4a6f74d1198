# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Helpers for reading untrusted Socket.IO payloads."""

from typing import Any, Dict, Optional


def as_payload(data: Any) -> Dict[str, Any]:
    """Return the payload if it is a dict, otherwise an empty dict."""
    return data if isinstance(data, dict) else {}


def get_optional_text(payload: Dict[str, Any], key: str) -> Optional[str]:
    """Read a string field, returning None when missing or not a string."""
    value = payload.get(key)
    return value if isinstance(value, str) else None
