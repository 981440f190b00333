"""Event model shared by fetchers and processors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


class EventType(enum.IntEnum):
    """Kind of an incoming event."""

    UNKNOWN = 0
    MESSAGE = 1


@dataclass(frozen=True)
class Event:
    """A single event received from a source."""

    type: EventType = EventType.UNKNOWN
    text: str = ""
    meta: Any = None


@runtime_checkable
class Fetcher(Protocol):
    """Something that yields batches of events."""

    def fetch(self, limit: int) -> list[Event]:
        """Return up to ``limit`` new events."""
        ...


@runtime_checkable
class Processor(Protocol):
    """Something that handles a single event."""

    def process(self, event: Event) -> None:
        """Handle ``event``, raising on failure."""
        ...