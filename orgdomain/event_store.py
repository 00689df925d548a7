"""Append-only storage for component data events."""

from __future__ import annotations

import abc
from typing import Any


class EventStore(abc.ABC):
    """Asynchronous append-only event log."""

    @abc.abstractmethod
    async def append(self, event: Any) -> None:
        """Add an event to the end of the log."""

    @abc.abstractmethod
    async def get_events(self) -> list[Any]:
        """Return every stored event in the order appended."""


class InMemoryEventStore(EventStore):
    """Event log held in a list."""

    def __init__(self) -> None:
        self._events: list[Any] = []

    async def append(self, event: Any) -> None:
        self._events.append(event)

    async def get_events(self) -> list[Any]:
        return list(self._events)