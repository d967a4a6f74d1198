# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

from trivia_night.src.domain.protocols.broadcaster_protocol import BroadcasterProtocol

__all__ = ["BroadcasterProtocol"]
