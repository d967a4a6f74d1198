# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Shared pytest fixtures.

FakeSocketServer stands in for ``socketio.AsyncServer``: it records the
handlers registered on it and every emitted event, so the whole handler ->
service -> broadcaster stack can be driven in-process.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import pytest

from trivia_night.src.application.bootstrap import GameServices
from trivia_night.src.routes.factories.websocket_handlers_state import TriviaWebSocketHandlers


@dataclass
class EmittedEvent:
    """One event handed to the fake server."""

    event: str
    args: List[Any] = field(default_factory=list)
    to: Optional[str] = None

    @property
    def payload(self) -> Any:
        return self.args[0] if self.args else None

    @property
    def is_broadcast(self) -> bool:
        return self.to is None


class FakeSocketServer:
    """Minimal in-memory replacement for socketio.AsyncServer."""

    def __init__(self):
        self.handlers: Dict[str, Callable] = {}
        self.emitted: List[EmittedEvent] = []

    def on(self, event: str, handler: Optional[Callable] = None, namespace: Optional[str] = None):
        def decorator(func: Callable) -> Callable:
            self.handlers[event] = func
            return func

        return decorator if handler is None else decorator(handler)

    def event(self, func: Callable) -> Callable:
        self.handlers[func.__name__] = func
        return func

    async def emit(self, event, data=None, to=None, room=None, **kwargs) -> None:
        # Same argument packing as python-socketio: a tuple is a list of arguments
        if isinstance(data, tuple):
            args = list(data)
        elif data is None:
            args = []
        else:
            args = [data]
        self.emitted.append(EmittedEvent(event=event, args=args, to=to or room))

    async def trigger(self, event: str, sid: str, *args: Any) -> Any:
        """Deliver an inbound event as if a client had sent it."""
        return await self.handlers[event](sid, *args)

    # Inspection helpers

    def events(self, name: str) -> List[EmittedEvent]:
        return [e for e in self.emitted if e.event == name]

    def last(self, name: str) -> Optional[EmittedEvent]:
        matching = self.events(name)
        return matching[-1] if matching else None

    def received_by(self, sid: str) -> List[EmittedEvent]:
        """Events a given connection would have received (direct + broadcasts)."""
        return [e for e in self.emitted if e.to is None or e.to == sid]

    def names(self) -> List[str]:
        return [e.event for e in self.emitted]

    def clear(self) -> None:
        self.emitted.clear()


@pytest.fixture
def sio() -> FakeSocketServer:
    return FakeSocketServer()


@pytest.fixture
def services(sio) -> GameServices:
    """Game services delivering through the fake server."""
    return GameServices.for_socketio(sio)


@pytest.fixture
def state(services):
    return services.state


@pytest.fixture
def gateway(sio, services) -> TriviaWebSocketHandlers:
    """Fully registered handler set."""
    handlers = TriviaWebSocketHandlers(sio, services)
    handlers.register()
    return handlers
